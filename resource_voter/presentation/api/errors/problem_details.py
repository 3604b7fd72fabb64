"""RFC 9457 Problem Details for authorization failures.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ProblemDetails: RFC 9457 error response schema with authorization
        extension members (code, attribute, resource_type, operation_kind)
"""

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Machine-readable error code (extension member)
        attribute: Denied permission attribute (extension member)
        resource_type: Resource type name (extension member)
        operation_kind: Operation kind value (extension member)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://resource-voter.local/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail='Access denied for attribute "article:update" ...',
        ...     instance="/articles/5",
        ...     code="permission_denied",
        ...     attribute="article:update",
        ...     resource_type="Article",
        ...     operation_kind="update",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://resource-voter.local/errors/forbidden"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[403])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/articles/5"],
    )
    code: str | None = Field(None, description="Machine-readable error code")
    attribute: str | None = Field(None, description="Denied permission attribute")
    resource_type: str | None = Field(None, description="Resource type name")
    operation_kind: str | None = Field(None, description="Operation kind")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
