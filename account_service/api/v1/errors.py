# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Local application imports
from ...core.exceptions import AccountServiceError, DependencyFailureError

logger = logging.getLogger(__name__)


async def account_service_error_handler(request: Request, exc: AccountServiceError) -> JSONResponse:
    """
    Render a service error as ``{"detail": <user message>}``

    Only the user-facing message leaves the process; the internal message is logged.
    """
    if isinstance(exc, DependencyFailureError) or exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, type(exc).__name__, exc.message)

    content = {"detail": exc.user_message}
    field = exc.details.get("field")
    if field:
        content["field"] = field
    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(AccountServiceError, account_service_error_handler)
