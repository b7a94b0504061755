"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module. Keyword arguments passed to
[Logger][lnconnect.core.logger.Logger] methods travel on the record as the
``structured_kv`` extra field and are rendered by
[StructuredFormatter][lnconnect.core.logger.StructuredFormatter] either as
``key=value`` pairs (default) or as one JSON object per line.

Plain ``logging.getLogger(__name__)`` calls from the lower layers go
through the same formatter once it is installed on the root handler, so
all output shares the ``level name message`` prefix.

Examples:
    ```python
    from lnconnect.core.logger import Logger

    logger = Logger("cli")
    logger.warning("connection_string_rejected", code="invalidPort", input="02ab@host:0")
    # Output: warning cli connection_string_rejected code=invalidPort input=02ab@host:0
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


_TRUNCATED = "...<truncated {} chars>"


def _truncate(value: str, max_value_length: int | None) -> str:
    if max_value_length and len(value) > max_value_length:
        return value[:max_value_length] + _TRUNCATED.format(len(value) - max_value_length)
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Values containing whitespace, equals signs or quotes are escaped and
    wrapped in double quotes; empty values are rendered as ``""``.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' key1=value1 key2="value with spaces"', or
        the empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or any(c in s for c in " =\"'"):
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")
    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level name message key=value ...`` or JSON.

    Args:
        json_output: Emit one JSON object per record instead of key=value
            text. The object carries ``timestamp``, ``level``, ``logger``,
            ``message`` and the structured fields.
    """

    def __init__(self, *, json_output: bool = False) -> None:
        super().__init__()
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if self._json_output:
            payload = {
                "timestamp": datetime.datetime.fromtimestamp(
                    record.created, datetime.UTC
                ).isoformat(),
                "level": record.levelname.lower(),
                "logger": record.name,
                "message": record.getMessage(),
                **extra,
            }
            return json.dumps(payload, default=str)
        return f"{record.levelname.lower()} {record.name} {record.getMessage()}" + (
            format_kv_pairs(extra, max_value_length=None)
        )


class Logger:
    """Structured logger that attaches keyword arguments to each record.

    Mirrors the standard logging API with an added ``**kwargs`` parameter.
    Values are truncated to ``max_value_length`` characters before they are
    attached, so oversized inputs (such as a pasted connection string list)
    never flood the output.

    Examples:
        ```python
        logger = Logger("cli")
        logger.info("config_loaded", path="lnconnect.yaml", port_mandatory=True)
        # Output: info cli config_loaded path=lnconnect.yaml port_mandatory=True
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(self, name: str, *, max_value_length: int | None = None) -> None:
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = {
            k: _truncate(v, self._max_value_length) if isinstance(v, str) else v
            for k, v in kwargs.items()
        }
        self._logger.log(level, msg, extra={"structured_kv": extra}, exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with the current exception traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
