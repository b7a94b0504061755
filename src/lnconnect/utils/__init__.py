"""Helpers built on top of the pure parsers.

Attributes:
    parsing: Tolerant batch parsing of connection string lists, logging and
        skipping invalid entries.

Note:
    The utils layer has **zero** imports from ``lnconnect.core``; options are
    passed in as any object with a ``parse`` method.
"""

from .parsing import parse_connection_strings, partition_connection_strings


__all__ = [
    "parse_connection_strings",
    "partition_connection_strings",
]
