"""
Logging setup for the users API.

Every line carries the id of the request being served (``-`` outside a
request). ``RequestIdMiddleware`` sets it through ``request_id_var``; the
filter below copies it onto each record, including records emitted from the
threadpool that runs the sync endpoints.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from pathlib import Path

from api.core.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def _handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def setup_logging(settings: Settings) -> None:
    """Attach console (and ``settings.log_file``) handlers to the root logger, once."""
    root = logging.getLogger()
    if root.handlers:
        # already configured (pytest capture, a second create_app, uvicorn --reload)
        return

    root.setLevel(settings.log_level)
    root.addHandler(_handler(logging.StreamHandler()))
    if settings.log_file:
        root.addHandler(_handler(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")))
