"""
Request logging middleware module.
Tags each request with a correlation ID and records how long it took.
"""
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request and adds correlation ID and process time headers"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed [correlation_id=%s]",
                request.method, request.url.path, correlation_id
            )
            raise

        process_time = time.perf_counter() - start_time
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        response.headers[PROCESS_TIME_HEADER] = f"{process_time:.4f}"

        logger.info(
            "%s %s -> %d in %.4fs [correlation_id=%s]",
            request.method, request.url.path, response.status_code,
            process_time, correlation_id
        )
        return response
