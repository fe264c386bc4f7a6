import time

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from vitutor.logger import logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        is_health_check = request.url.path == "/api/health"
        log_func = logger.debug if is_health_check else logger.info

        log_func(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            log_func(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        except Exception as e:
            duration = time.time() - start_time
            logger.exception(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": "Internal server error"},
            )
