"""RFC 9457 error responses for authorization failures.

Usage:
    from resource_voter.presentation.api.errors import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from resource_voter.presentation.api.errors.exception_handlers import (
    access_denied_handler,
    configuration_error_handler,
    register_exception_handlers,
)
from resource_voter.presentation.api.errors.problem_details import ProblemDetails

__all__ = [
    "ProblemDetails",
    "access_denied_handler",
    "configuration_error_handler",
    "register_exception_handlers",
]
