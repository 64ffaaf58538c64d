"""
JSON logging and per-request context.

Every log line is a single JSON object. The request id is carried in a ContextVar
set by the HTTP middleware in `src.api.main`, so service code can log without
passing it around.
"""

from __future__ import annotations

import json
import logging
from contextvars import ContextVar
from typing import Optional

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

LOGGER_NAME = "shop"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", _request_id_ctx.get()),
            "member_id": getattr(record, "member_id", None),
            "order_id": getattr(record, "order_id", None),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def set_request_id(request_id: Optional[str]) -> None:
    _request_id_ctx.set(request_id)


def get_request_id() -> Optional[str]:
    return _request_id_ctx.get()


def log_event(
    message: str,
    *,
    member_id: Optional[int] = None,
    order_id: Optional[int] = None,
    level: int = logging.INFO,
) -> None:
    get_logger().log(
        level,
        message,
        extra={
            "request_id": get_request_id(),
            "member_id": member_id,
            "order_id": order_id,
        },
    )
