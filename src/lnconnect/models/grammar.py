"""Textual grammars recognized by the connection string parsers.

Each grammar is a compiled pattern applied with ``fullmatch`` plus, where a
pattern alone cannot express the rule, a small predicate enforcing it
(octet ranges, IPv6 group counts, overall domain length). All patterns are
ASCII-only: ``[0-9]`` is used instead of ``\\d`` so non-ASCII digits never
slip through.

The predicates are pure and hold no state; the compiled patterns are
created once at import time and only ever read.

See Also:
    [parse_host()][lnconnect.models.address.parse_host]: Tries the host
        grammars in order IPv4, IPv6, Tor v3, domain.
    [split_host_and_port()][lnconnect.models.address.split_host_and_port]:
        Uses ``BRACKETED_ADDRESS`` to detect the unambiguous form.
"""

from __future__ import annotations

import re

from .constants import (
    DOMAIN_LABEL_MAX_LENGTH,
    DOMAIN_MAX_LENGTH,
    IPV6_GROUPS,
    PUBKEY_LENGTH,
    PUBKEY_PREFIXES,
)


# ``[<content>]`` optionally followed by ``:<port>``. The port is captured
# verbatim and validated later.
BRACKETED_ADDRESS = re.compile(r"\[(?P<content>[^\[\]]*)\](?::(?P<port>.*))?", re.DOTALL)

IPV4_OCTET = re.compile(r"[0-9]{1,3}")
IPV6_GROUP = re.compile(r"[0-9A-Fa-f]{1,4}")
TORV3 = re.compile(r"[a-z2-7]{56}\.onion")
DOMAIN_LABEL = re.compile(
    rf"[A-Za-z0-9](?:[A-Za-z0-9-]{{0,{DOMAIN_LABEL_MAX_LENGTH - 2}}}[A-Za-z0-9])?"
)
NUMERIC_LABEL = re.compile(r"[0-9]+")
PORT = re.compile(r"[0-9]+")
_PUBKEY_PREFIX = "|".join(PUBKEY_PREFIXES)
PUBKEY = re.compile(rf"(?:{_PUBKEY_PREFIX})[0-9A-Fa-f]{{{PUBKEY_LENGTH - 2}}}")


def is_ipv4(value: str) -> bool:
    """Return True for four dot-separated decimal octets, each 0-255."""
    octets = value.split(".")
    if len(octets) != 4:
        return False
    return all(IPV4_OCTET.fullmatch(octet) and int(octet) <= 255 for octet in octets)


def is_ipv6(value: str) -> bool:
    """Return True for a full or ``::``-compressed IPv6 literal.

    The uncompressed form has exactly eight groups of one to four hex
    digits. The compressed form has a single ``::`` standing for at least
    one all-zero group, so at most seven explicit groups may surround it.
    Zone identifiers and embedded IPv4 tails are not accepted.
    """
    if value.count("::") > 1:
        return False

    if "::" not in value:
        groups = value.split(":")
        return len(groups) == IPV6_GROUPS and all(IPV6_GROUP.fullmatch(g) for g in groups)

    head, tail = value.split("::")
    groups = [g for part in (head, tail) if part for g in part.split(":")]
    if len(groups) > IPV6_GROUPS - 1:
        return False
    return all(IPV6_GROUP.fullmatch(g) for g in groups)


def is_torv3(value: str) -> bool:
    """Return True for 56 lowercase base32 characters followed by ``.onion``."""
    return TORV3.fullmatch(value) is not None


def is_domain(value: str) -> bool:
    """Return True for a multi-label DNS name.

    Labels are 1-63 letters, digits or hyphens without a leading or trailing
    hyphen. At least two labels are required (``localhost`` is rejected),
    the whole name is at most 253 characters, and the last label may not be
    purely numeric, which rules out IPv4-shaped strings.
    """
    if not value or len(value) > DOMAIN_MAX_LENGTH:
        return False
    labels = value.split(".")
    if len(labels) < 2:
        return False
    if NUMERIC_LABEL.fullmatch(labels[-1]):
        return False
    return all(DOMAIN_LABEL.fullmatch(label) for label in labels)


def is_port(value: str) -> bool:
    """Return True when *value* is a non-empty run of ASCII digits."""
    return PORT.fullmatch(value) is not None


def is_pubkey(value: str) -> bool:
    """Return True for 66 hex characters starting with ``02`` or ``03``."""
    return PUBKEY.fullmatch(value) is not None
