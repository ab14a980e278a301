# 📄 File: findeasily/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a short diary line for every request to the site: what was asked for, how it ended and
# how long it took, tagged with a request number so related log lines can be found together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware. Assigns or propagates X-Request-ID, stores it in the logging
# context var and on request.state, and logs completion with timing. Slow requests are logged
# at WARNING.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, findeasily.shared.utils.logging (log_context)
# 🔄 Connected Modules / Calls From:
# findeasily.main (middleware registration), error handlers (request_id in error bodies)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from findeasily.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware with request ID correlation.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                logger.error(
                    f"{request.method} {request.url.path} failed after "
                    f"{time.perf_counter() - start_time:.3f}s",
                    exc_info=True
                )
                raise

            processing_time = time.perf_counter() - start_time
            level = logging.WARNING if processing_time > self.slow_request_threshold else logging.INFO
            logger.log(
                level,
                f"{request.method} {request.url.path} -> {response.status_code} in {processing_time:.3f}s",
                extra={"extra_fields": {
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_seconds": round(processing_time, 4),
                    "client_ip": request.client.host if request.client else None,
                }}
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{processing_time:.3f}s"
        return response
