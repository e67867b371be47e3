"""Mapping of discussion errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from discuss.domain.error import DiscussionError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.DISCUSSIONS_NOT_ENABLED: status.HTTP_404_NOT_FOUND,
    ErrorKind.THREAD_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.COMMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.THREAD_LOCKED: status.HTTP_403_FORBIDDEN,
    ErrorKind.INSUFFICIENT_PERMISSION: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONTENT_TOO_SHORT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONTENT_TOO_LONG: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MAX_NESTING_DEPTH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_VOTE_DIRECTION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def discussion_error_handler(
    request: Request, exc: DiscussionError
) -> JSONResponse:
    """Render a DiscussionError as JSON with the status of its kind."""
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        logfire.error(
            "Discussion request failed",
            kind=exc.kind.value,
            path=request.url.path,
            error=str(exc),
        )
        # Internal details stay in the logs
        detail = "Internal error"
    else:
        detail = str(exc)

    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "error": exc.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the discussion error handler on an application."""
    app.add_exception_handler(DiscussionError, discussion_error_handler)
