"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module so that jidkit events carry
machine-readable fields: human-readable key=value pairs by default, JSON
objects for log aggregators.

Values containing spaces, equals signs or quotes are escaped and wrapped in
double quotes. Long values (an oversized resource, for instance) are
truncated to a configurable maximum length.

Address construction is a hot path, so every method returns immediately
when its level is disabled, before any formatting work.

Examples:
    ```python
    from jidkit.core.logger import Logger

    logger = Logger("jidkit.prep")
    logger.debug("component_rejected", kind="node", reason="normalization")
    # Output: component_rejected kind=node reason=normalization

    json_logger = Logger("jidkit.prep", json_output=True)
    json_logger.info("normalizer_initialized", node_cache=10000)
    # Output: {"timestamp": "...", "level": "info", ..., "node_cache": 10000}
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' kind=node value="a b"'. Returns an empty
        string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or " " in s or "=" in s or '"' in s or "'" in s:
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


def _truncate(s: str, max_value_length: int | None) -> str:
    if max_value_length and len(s) > max_value_length:
        return s[:max_value_length] + f"...<truncated {len(s) - max_value_length} chars>"
    return s


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level name message key=value...``.

    Reads structured data from the ``structured_kv`` extra field attached
    by [Logger][jidkit.core.logger.Logger]. Records emitted through plain
    ``logging.getLogger()`` calls (the utils layer) get the same prefix
    without fields.

    jidkit never configures handlers. The hosting application attaches this
    formatter to its own handler for key=value output; JSON output is
    selected per normalizer with ``PrepConfig.json_logs``.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    Args:
        name: Name passed to ``logging.getLogger()``.
        json_output: Emit JSON objects instead of key=value pairs.
        max_value_length: Truncation threshold for individual values.
            Defaults to 1000.
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **{k: self._clip(v) for k, v in kwargs.items()},
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if not kwargs:
            return {}
        return {"structured_kv": {k: self._clip(v) for k, v in kwargs.items()}}

    def _clip(self, value: Any) -> Any:
        """Truncate the string form of *value* if it is too long, else keep it as is."""
        s = str(value)
        if self._max_value_length and len(s) > self._max_value_length:
            return _truncate(s, self._max_value_length)
        return value

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if self._json_output:
            name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, name, kwargs), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a WARNING level message with optional key=value pairs."""
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with the current exception traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
