"""Console logging for the token service.

Structured ``extra={"data": ...}`` payloads are rendered after the message, or
as one JSON object per line when running under Cloud Run or Kubernetes. Token
values found in payloads are replaced with their fingerprint before rendering.
"""

from __future__ import annotations

import json
import logging
import os
import time
import traceback
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import datetime
from logging.config import dictConfig
from typing import Any

from huskyci_token.infrastructure.token_generator import fingerprint

_PACKAGE_LOGGER = "huskyci_token"
_SECRET_KEYS = frozenset({"token", "husky_token"})
_MAX_DEPTH = 6


def _level(env_var: str, default: str) -> str:
    return os.getenv(env_var, default).upper()


def _json_lines_enabled() -> bool:
    return bool(os.getenv("K_SERVICE") or os.getenv("KUBERNETES_SERVICE_HOST"))


def redact(value: Any, depth: int = _MAX_DEPTH) -> Any:
    """Return a JSON-serializable copy of ``value`` with token values fingerprinted."""
    if depth <= 0:
        return "<depth_exceeded>"
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes len={len(value)}>"
    if is_dataclass(value) and not isinstance(value, type):
        value = {item.name: getattr(value, item.name) for item in fields(value)}
    if isinstance(value, Mapping):
        return {
            str(key): _redact_entry(str(key), item, depth - 1) for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact(item, depth - 1) for item in value]
    return str(value)


def _redact_entry(key: str, value: Any, depth: int) -> Any:
    if key.lower() in _SECRET_KEYS and isinstance(value, str):
        return f"<token {fingerprint(value)}>"
    return redact(value, depth)


def _encode(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class ExtrasFormatter(logging.Formatter):
    """Render the record with its redacted ``data`` payload."""

    def format(self, record: logging.LogRecord) -> str:
        raw_data = record.__dict__.get("data")
        data = redact(raw_data) if raw_data else None

        if _json_lines_enabled():
            return _encode(self._payload(record, data))

        formatted = super().format(record)
        if data is None:
            return formatted
        return f"{formatted} | data={_encode(data)}"

    def _payload(self, record: logging.LogRecord, data: Any | None) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "message": record.getMessage(),
            "severity": record.levelname,
            "logger": record.name,
            "timestamp": (
                f"{time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created))}"
                f".{int(record.msecs):03d}Z"
            ),
        }
        if data is not None:
            payload["data"] = data
        if record.exc_info:
            payload["exception"] = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")
        return payload


def build_log_config(
    *,
    root_level_env: str = "LOG_LEVEL",
    root_default: str = "INFO",
) -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""
    root_level = _level(root_level_env, root_default)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": root_level, "handlers": ["console"]},
        "loggers": {
            _PACKAGE_LOGGER: {
                "level": _level("HUSKYCI_TOKEN_LOG_LEVEL", root_level),
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def init_logging() -> None:
    """Bootstrap console logging from ``LOG_LEVEL`` / ``HUSKYCI_TOKEN_LOG_LEVEL``."""
    dictConfig(build_log_config())
    logging.getLogger("huskyci_token.observability.logging").debug("configured logging")


__all__ = ["ExtrasFormatter", "build_log_config", "init_logging", "redact"]
