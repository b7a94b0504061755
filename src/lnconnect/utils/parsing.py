"""Tolerant parsing of connection string lists.

Peer lists (configuration files, gossip dumps, user input) often contain a
few bad entries. These helpers parse each entry independently, keep the
valid results, and log the rejected ones at WARNING level with their
[ParseFailureCode][lnconnect.models.errors.ParseFailureCode].

The module depends only on :mod:`lnconnect.models` and the standard library.
Options are taken from any object exposing a ``parse(str)`` method, usually a
[ParserConfig][lnconnect.core.config.ParserConfig].

Examples:
    ```python
    from lnconnect.utils.parsing import parse_connection_strings

    peers = parse_connection_strings(lines)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from lnconnect.models import ParsedConnectionString, ParseError, parse_connection_string


if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_MAX_LOGGED_INPUT = 1000


class SupportsParse(Protocol):
    def parse(self, connection_string: str) -> ParsedConnectionString: ...


def partition_connection_strings(
    values: Iterable[str],
    *,
    config: SupportsParse | None = None,
) -> tuple[list[ParsedConnectionString], list[tuple[str, ParseError]]]:
    """Split inputs into parsed results and rejected entries.

    Returns:
        ``(parsed, rejected)`` where *rejected* pairs each failing input
        with the [ParseError][lnconnect.models.errors.ParseError] it raised.
        Input order is preserved in both lists.
    """
    parse = config.parse if config is not None else parse_connection_string
    parsed: list[ParsedConnectionString] = []
    rejected: list[tuple[str, ParseError]] = []
    for value in values:
        try:
            parsed.append(parse(value))
        except ParseError as e:
            rejected.append((value, e))
    return parsed, rejected


def parse_connection_strings(
    values: Iterable[str],
    *,
    config: SupportsParse | None = None,
) -> list[ParsedConnectionString]:
    """Parse connection strings, skipping invalid entries.

    Entries raising [ParseError][lnconnect.models.errors.ParseError] are
    logged and discarded.
    """
    parsed, rejected = partition_connection_strings(values, config=config)
    for value, error in rejected:
        logger.warning(
            "connection_string_rejected code=%s input=%.*r", error.code, _MAX_LOGGED_INPUT, value
        )
    return parsed


__all__ = [
    "SupportsParse",
    "parse_connection_strings",
    "partition_connection_strings",
]
