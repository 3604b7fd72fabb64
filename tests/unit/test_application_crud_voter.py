"""Unit tests for CrudVoter.

Tests cover:
- Prefix derivation and explicit prefixes
- supports(): prefix, operation, subject type, targeted subjects
- vote(): CRUD hook dispatch, update pairs, custom operations
- Custom operation registration and handler-name collisions
- Configuration errors
"""

from unittest.mock import MagicMock

import pytest

from resource_voter.application.voters import CrudVoter
from resource_voter.core.enums import ErrorCode
from resource_voter.core.errors import ConfigurationError
from resource_voter.domain.enums import Decision
from resource_voter.domain.value_objects import TargetedSubject, UpdateSubject
from tests.utils.voting import (
    Article,
    ArticleVoter,
    Comment,
    EditorArticleVoter,
)


@pytest.fixture
def article() -> Article:
    return Article(id=5, author_id=7)


@pytest.fixture
def voter() -> ArticleVoter:
    return ArticleVoter(current_user_id=7)


# =============================================================================
# Configuration
# =============================================================================


@pytest.mark.unit
class TestConfiguration:
    """Test prefix and resource type binding."""

    def test_prefix_defaults_to_first_type_name(self):
        voter = CrudVoter(resource_types=[Article, Comment])

        assert voter.prefix == "article"

    def test_explicit_prefix(self):
        voter = CrudVoter(prefix="post", resource_types=Article)

        assert voter.supports("post:read", Article(id=1, author_id=1))
        assert not voter.supports("article:read", Article(id=1, author_id=1))

    def test_no_prefix_no_types_raises(self):
        voter = CrudVoter()

        with pytest.raises(ConfigurationError):
            voter.supports("article:read", object())

    def test_prefix_without_types_raises_on_subject_check(self):
        voter = CrudVoter(prefix="article")

        with pytest.raises(ConfigurationError):
            voter.supports("article:read", Article(id=1, author_id=1))

    def test_non_class_resource_type_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CrudVoter(resource_types=["Article"])  # type: ignore[list-item]

        assert exc_info.value.code == ErrorCode.INVALID_RESOURCE_TYPE

    def test_invalid_prefix_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CrudVoter(prefix="a:b", resource_types=Article)

        assert exc_info.value.code == ErrorCode.INVALID_PREFIX


# =============================================================================
# supports()
# =============================================================================


@pytest.mark.unit
class TestSupports:
    """Test supports()."""

    @pytest.mark.parametrize(
        "attribute",
        ["article:list", "article:read", "article:create", "article:update",
         "article:delete", "article:publish"],
    )
    def test_known_operations(self, voter, article, attribute: str):
        assert voter.supports(attribute, article)

    @pytest.mark.parametrize(
        "attribute",
        ["comment:read", "articles:read", "article:", "article: ", "article:-",
         "article:archive", "read"],
    )
    def test_unknown_attributes(self, voter, article, attribute: str):
        """Test other prefixes and unregistered operations are rejected."""
        assert not voter.supports(attribute, article)

    def test_wrong_subject_type(self, voter):
        assert not voter.supports("article:read", Comment(id=1, author_id=7))
        assert not voter.supports("article:read", None)

    def test_class_subject(self, voter):
        """Test a resource type token is accepted for collection checks."""
        assert voter.supports("article:list", Article)
        assert not voter.supports("article:list", Comment)

    def test_pair_subject_checks_current_object(self, voter, article):
        assert voter.supports("article:update", UpdateSubject(article, None))
        assert not voter.supports("article:update", (Comment(id=1, author_id=1), article))

    def test_targeted_at_this_voter(self, voter, article):
        assert voter.supports("article:read", TargetedSubject(article, ArticleVoter))

    def test_targeted_at_other_voter(self, voter, article):
        subject = TargetedSubject(article, EditorArticleVoter)

        assert not voter.supports("article:read", subject)
        assert voter.vote("article:read", subject) is Decision.ABSTAIN


# =============================================================================
# vote()
# =============================================================================


@pytest.mark.unit
class TestVote:
    """Test hook dispatch."""

    def test_abstains_when_unsupported(self, voter, article):
        assert voter.vote("comment:read", article) is Decision.ABSTAIN

    def test_default_hooks_grant(self, article):
        voter = CrudVoter(resource_types=Article)

        for operation in ("read", "create", "update", "delete"):
            assert voter.vote(f"article:{operation}", article) is Decision.GRANT
        assert voter.vote("article:list", Article) is Decision.GRANT

    def test_list_hook(self, article):
        assert ArticleVoter(current_user_id=7).vote("article:list", Article) is (
            Decision.GRANT
        )
        assert ArticleVoter(current_user_id=None).vote("article:list", Article) is (
            Decision.DENY
        )

    def test_update_uses_previous_object(self, voter):
        """Test the update hook sees the pre-update state."""
        payload = Article(id=5, author_id=99)
        owned = Article(id=5, author_id=7)
        foreign = Article(id=5, author_id=8)

        assert voter.vote("article:update", UpdateSubject(payload, owned)) is (
            Decision.GRANT
        )
        assert voter.vote("article:update", UpdateSubject(payload, foreign)) is (
            Decision.DENY
        )
        assert voter.vote("article:update", UpdateSubject(payload, None)) is (
            Decision.DENY
        )

    def test_update_with_plain_object(self, article):
        """Test a non-pair subject reaches can_update with previous None."""
        voter = CrudVoter(resource_types=Article)
        voter.can_update = MagicMock(return_value=True)  # type: ignore[method-assign]

        voter.vote("article:update", article)

        voter.can_update.assert_called_once_with(article, None)

    def test_delete_hook(self, voter):
        assert voter.vote("article:delete", Article(id=1, author_id=7)) is (
            Decision.GRANT
        )
        assert voter.vote("article:delete", Article(id=1, author_id=8)) is (
            Decision.DENY
        )

    def test_targeted_subjects_decide_independently(self, article):
        """Test two voters sharing a prefix: only the targeted one votes."""
        author_voter = ArticleVoter(current_user_id=1)
        editor_voter = EditorArticleVoter(is_editor=True)

        to_author = TargetedSubject(UpdateSubject(article, article), ArticleVoter)
        to_editor = TargetedSubject(UpdateSubject(article, article), "editor-article-voter")

        assert author_voter.vote("article:update", to_author) is Decision.DENY
        assert editor_voter.vote("article:update", to_author) is Decision.ABSTAIN
        assert author_voter.vote("article:update", to_editor) is Decision.ABSTAIN
        assert editor_voter.vote("article:update", to_editor) is Decision.GRANT

    def test_logs_decision(self, article):
        logger = MagicMock()
        voter = CrudVoter(resource_types=Article, logger=logger)

        voter.vote("article:read", article)

        logger.debug.assert_called_once()
        assert logger.debug.call_args.args[0] == "voter_decision"
        assert logger.debug.call_args.kwargs["decision"] == "grant"


# =============================================================================
# Custom operations
# =============================================================================


@pytest.mark.unit
class TestCustomOperations:
    """Test custom operation registration and dispatch."""

    def test_registered_handler_decides(self, voter):
        assert voter.vote("article:publish", Article(id=1, author_id=7)) is (
            Decision.GRANT
        )
        assert voter.vote("article:publish", Article(id=1, author_id=8)) is (
            Decision.DENY
        )

    @pytest.mark.parametrize(
        "attribute",
        ["article:publish-article", "article:publish_article", "article:publishArticle"],
    )
    def test_separator_styles_share_handler(self, article, attribute: str):
        handler = MagicMock(return_value=True)
        voter = CrudVoter(
            resource_types=Article, operations={"publish-article": handler}
        )

        assert voter.vote(attribute, article) is Decision.GRANT
        handler.assert_called_once_with(article, None)

    def test_handler_receives_previous(self, article):
        handler = MagicMock(return_value=False)
        previous = Article(id=5, author_id=1)
        voter = CrudVoter(resource_types=Article, operations={"archive": handler})

        assert voter.vote("article:archive", (article, previous)) is Decision.DENY
        handler.assert_called_once_with(article, previous)

    def test_colliding_tokens_raise(self):
        voter = CrudVoter(resource_types=Article)
        voter.register_operation("publish-2fa", lambda obj, prev: True)

        with pytest.raises(ConfigurationError) as exc_info:
            voter.register_operation("publish2fa", lambda obj, prev: False)

        assert exc_info.value.code == ErrorCode.OPERATION_NAME_COLLISION

    def test_same_registration_is_idempotent(self):
        def handler(obj, previous):
            return True

        voter = CrudVoter(resource_types=Article)
        voter.register_operation("publish", handler)
        voter.register_operation("publish", handler)

        assert voter.custom_operations == ("publish",)

    @pytest.mark.parametrize("token", ["read", "", "  ", "a:b", "-", "_", "- _"])
    def test_invalid_custom_tokens_rejected(self, token: str):
        voter = CrudVoter(resource_types=Article)

        with pytest.raises(ConfigurationError):
            voter.register_operation(token, lambda obj, prev: True)

    def test_unregistered_custom_hook_denies(self, article):
        voter = CrudVoter(resource_types=Article)

        assert voter.can_custom_operation("archive", article, None) is False
