"""Structured Logging — JSON log lines and per-request access records.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Any field passed through `extra=` is emitted; LogRecord internals never are
    - One access record per request: method, path, status_code, duration_ms

Design Decisions:
    - Access records come from an HTTP middleware, not uvicorn's access logger:
      they share the JSON format and survive running under other ASGI servers
    - Request bodies are never logged (identity payloads carry email addresses)
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request

_RECORD_ATTRS = frozenset(vars(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None),
)) | {"message", "asctime", "taskName"}

access_logger = logging.getLogger("gateway.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update(
            (key, value) for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure the root logger once at startup."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # gateway.access already records every request
    logging.getLogger("uvicorn.access").disabled = True


def register_access_log(app: FastAPI) -> None:
    """Log one structured record per handled request."""

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        access_logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
