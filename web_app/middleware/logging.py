"""Access log for the web app."""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shortener.common.logging_config import LOGGER_NAME


class LoggingMiddleware(BaseHTTPMiddleware):
    """One line per request: client, method, path, status and elapsed time.

    uvicorn's access log is switched off in app.py, so this is the only one.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger(f"{LOGGER_NAME}.web")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        client = request.client.host if request.client else "-"

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            self.logger.exception(f"{client} {request.method} {request.url.path} failed after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        self.logger.info(f"{client} {request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response
