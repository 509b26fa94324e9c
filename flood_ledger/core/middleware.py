import logging
import time
import uuid
from contextvars import ContextVar

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from flood_ledger.core.exceptions import AppException, create_http_exception

logger = logging.getLogger(__name__)

# Context Variable for Request ID (accessed by logging filter)
request_id_context = ContextVar("request_id", default=None)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle request logging and context management.
    Should run BEFORE ErrorHandlingMiddleware to ensure context is set.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_context.set(request_id)

        if request.url.path not in ("/health", "/metrics"):
            logger.info(f"Request: {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        if request.url.path not in ("/health", "/metrics"):
            logger.info(f"Response: {response.status_code} - {process_time:.3f}s")

        response.headers["X-Request-ID"] = request_id
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle exceptions globally and provide structured error responses.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request_id_context.get() or str(uuid.uuid4())

        try:
            return await call_next(request)

        except AppException as exc:
            http_exc = create_http_exception(exc)

            error_content = {
                "error": {
                    "code": exc.__class__.__name__,
                    "message": http_exc.detail,
                    "details": exc.details,
                    "request_id": request_id,
                    "status_code": http_exc.status_code,
                }
            }

            logger.warning(
                f"Application Error: {exc.message} ({exc.__class__.__name__})"
            )

            return JSONResponse(
                status_code=http_exc.status_code,
                content=error_content,
                headers={"X-Request-ID": request_id, **(http_exc.headers or {})},
            )

        except Exception as exc:
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            error_content = {
                "error": {
                    "code": "InternalServerException",
                    "message": "An unexpected error occurred.",
                    "details": (
                        str(exc)
                        if logging.getLogger().isEnabledFor(logging.DEBUG)
                        else None
                    ),
                    "request_id": request_id,
                    "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                }
            }

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_content,
                headers={"X-Request-ID": request_id},
            )
