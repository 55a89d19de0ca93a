from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_LOG_STD_KEYS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename', 'module', 'exc_info',
    'exc_text', 'stack_info', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'asctime', 'taskName',
}

_TRUTHY = {"1", "true", "yes"}


def _jsonable(value: Any) -> bool:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return True
    if isinstance(value, (list, dict)):
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            return False
        return True
    return False


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k in _LOG_STD_KEYS or k.startswith('_'):
                continue
            if _jsonable(v):
                payload[k] = v
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class ContextAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call `extra` over the static fields."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


def _env_log_path() -> Path | None:
    if os.getenv("DELIMKIT_LOG_JSON_TO_FILE", "").strip().lower() not in _TRUTHY:
        return None
    return Path(os.getenv("DELIMKIT_LOG_FILE", "logs/delimkit.jsonl"))


def get_json_logger(
    name: str,
    *,
    log_path: Path | None = None,
    level: int = logging.INFO,
    static_fields: dict[str, Any] | None = None,
) -> ContextAdapter:
    """Create or fetch a JSON logger with optional file output and static fields.

    Env overrides (used only when `log_path` is None):
      - DELIMKIT_LOG_JSON_TO_FILE: when truthy ("1", "true", "yes"), log to a file.
      - DELIMKIT_LOG_FILE: path to JSONL log file (default: "logs/delimkit.jsonl").
      - CORRELATION_ID: injected as `correlation_id` unless given in `static_fields`.

    Handlers are attached once per logger name; later calls only wrap the
    existing logger in a new adapter.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(level)
        target = log_path if log_path is not None else _env_log_path()
        if target is not None:
            target.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = logging.FileHandler(target, encoding='utf-8')
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    fields = dict(static_fields or {})
    cid = os.getenv("CORRELATION_ID", "").strip()
    if cid and "correlation_id" not in fields:
        fields["correlation_id"] = cid
    return ContextAdapter(logger, extra=fields)


def get_context_logger(
    name: str,
    context: dict[str, Any] | None = None,
    *,
    log_path: Path | None = None,
    level: int = logging.INFO,
) -> ContextAdapter:
    """Convenience wrapper to obtain a JSON logger with contextual fields.

    Example:
        logger = get_context_logger("delimiters.staggered", {"char": "*"})
    """
    return get_json_logger(name, log_path=log_path, level=level, static_fields=context)
