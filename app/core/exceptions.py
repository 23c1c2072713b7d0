"""Custom exceptions and exception handlers."""

from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class IssueSummaryError(Exception):
    """Base exception for the issue summary service."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(IssueSummaryError):
    """Caller input rejected before any network call."""

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


class FetchError(IssueSummaryError):
    """Reading an issue from Jira failed."""

    def __init__(self, upstream_status: Optional[int] = None):
        msg = "Failed to fetch issue details"
        if upstream_status is not None:
            msg += f": {upstream_status}"
        self.upstream_status = upstream_status
        super().__init__(msg, status_code=status.HTTP_502_BAD_GATEWAY)


class UpdateError(IssueSummaryError):
    """Writing the summary back to Jira failed."""

    def __init__(self, upstream_status: Optional[int] = None):
        msg = "Failed to update issue summary"
        if upstream_status is not None:
            msg += f": {upstream_status}"
        self.upstream_status = upstream_status
        super().__init__(msg, status_code=status.HTTP_502_BAD_GATEWAY)


class SummarizationError(IssueSummaryError):
    """Summary generation failed."""

    def __init__(
        self,
        message: str = "Failed to generate summary",
        status_code: int = status.HTTP_502_BAD_GATEWAY,
    ):
        super().__init__(message, status_code=status_code)


class InvalidInputError(SummarizationError):
    """Source text is missing or empty."""

    def __init__(self):
        super().__init__(
            "Text to summarize must be a non-empty string",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )


class UpstreamError(SummarizationError):
    """The generation API answered with a non-success status.

    ``payload`` holds the upstream error body for operators; it is never
    part of the message.
    """

    def __init__(self, upstream_status: Optional[int] = None, payload: Any = None):
        self.upstream_status = upstream_status
        self.payload = payload
        super().__init__("Summarization API returned an error")


class EmptyResultError(SummarizationError):
    """The generation API answered but produced no usable text."""

    def __init__(self):
        super().__init__("Summarization API returned no summary")


async def issue_summary_exception_handler(
    request: Request, exc: IssueSummaryError
) -> JSONResponse:
    """Handle IssueSummaryError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": type(exc).__name__},
    )
