from __future__ import annotations

import logging
import time
import uuid

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from api.core.logging_config import request_id_var

REQUEST_ID_HEADER = "X-Request-ID"
FAULT_MESSAGE = "something went wrong"

logger = logging.getLogger("api.access")


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id (reusing the client's when present) and log one access line.

    Unhandled errors from the endpoint become the 500 envelope here, so faulty
    requests still get their access line and ``X-Request-ID`` header.
    """

    async def dispatch(self, request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("unhandled error on %s %s", request.method, request.url.path)
                response = JSONResponse({"error": FAULT_MESSAGE}, status_code=500)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1fms)",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
        finally:
            request_id_var.reset(token)
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response
