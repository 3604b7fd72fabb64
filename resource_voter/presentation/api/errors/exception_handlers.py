"""FastAPI exception handlers for authorization errors.

Handlers:
    access_denied_handler: AccessDeniedError / NoApplicableVoterError -> 403
    configuration_error_handler: ConfigurationError -> 500 (details logged,
        never sent to the client)

Exports:
    register_exception_handlers: Register both handlers with a FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from resource_voter.core.config import get_settings
from resource_voter.core.errors import (
    AccessDeniedError,
    ConfigurationError,
    NoApplicableVoterError,
)
from resource_voter.presentation.api.errors.problem_details import ProblemDetails

# HTTP status code -> (title, slug) for RFC 9457 type URLs
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    403: ("Access Denied", "forbidden"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _problem_type(slug: str) -> str:
    return f"{get_settings().problem_base_url}/errors/{slug}"


async def access_denied_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert an authorization denial to a 403 Problem Details response.

    NoApplicableVoterError uses its own type slug ("no-applicable-voter") so
    clients and operators can tell "nobody decided" from "explicitly denied".

    Example:
        >>> # {
        >>> #   "type": "https://resource-voter.local/errors/forbidden",
        >>> #   "title": "Access Denied",
        >>> #   "status": 403,
        >>> #   "detail": "Access denied for attribute \"article:update\" ...",
        >>> #   "instance": "/articles/5",
        >>> #   "code": "permission_denied",
        >>> #   "attribute": "article:update",
        >>> #   "resource_type": "Article",
        >>> #   "operation_kind": "update"
        >>> # }
    """
    assert isinstance(exc, AccessDeniedError)

    title, slug = _HTTP_STATUS_INFO[status.HTTP_403_FORBIDDEN]
    if isinstance(exc, NoApplicableVoterError):
        slug = "no-applicable-voter"

    problem = ProblemDetails(
        type=_problem_type(slug),
        title=title,
        status=status.HTTP_403_FORBIDDEN,
        detail=exc.message,
        instance=str(request.url.path),
        code=exc.code.value,
        attribute=exc.attribute,
        resource_type=exc.resource_type,
        operation_kind=exc.operation_kind,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=problem.model_dump(exclude_none=True),
    )


async def configuration_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert a ConfigurationError to a generic 500 response."""
    assert isinstance(exc, ConfigurationError)

    from resource_voter.core.container import get_logger

    trace_id = getattr(request.state, "trace_id", None)
    get_logger().error(
        "authorization_configuration_error",
        error=exc,
        code=exc.code.value,
        request_path=request.url.path,
        trace_id=trace_id,
    )

    title, slug = _HTTP_STATUS_INFO[status.HTTP_500_INTERNAL_SERVER_ERROR]
    problem = ProblemDetails(
        type=_problem_type(slug),
        title=title,
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Authorization is misconfigured. Please contact support.",
        instance=str(request.url.path),
        code=exc.code.value,
        trace_id=trace_id,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register authorization exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    # NoApplicableVoterError is an AccessDeniedError subclass
    app.add_exception_handler(AccessDeniedError, access_denied_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
