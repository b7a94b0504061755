"""Shared constants for the models layer.

Defines the host classification enum and the numeric limits used by the
address and connection string parsers. Placing them here avoids circular
dependencies between the parser modules.

See Also:
    [lnconnect.models.address][]: Uses [HostType][lnconnect.models.constants.HostType]
        to tag a validated host.
    [lnconnect.models.connection_string][]: Uses the public key limits.
"""

from __future__ import annotations

from enum import StrEnum


class HostType(StrEnum):
    """Host kind assigned to a validated host.

    Each host is classified into exactly one type by
    [parse_host()][lnconnect.models.address.parse_host]. The grammars are
    tried in declaration order and the first full match wins.

    Attributes:
        IPV4: Dotted-quad IPv4 literal (``34.65.85.39``).
        IPV6: Full or ``::``-compressed IPv6 literal.
        TORV3: Tor v3 hidden service (56 base32 characters + ``.onion``).
        DOMAIN: DNS domain name with at least two labels.

    Examples:
        ```python
        parse_host("127.0.0.1")        # ('127.0.0.1', HostType.IPV4)
        parse_host("swiss-reign.ch")   # ('swiss-reign.ch', HostType.DOMAIN)
        ```
    """

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    TORV3 = "torv3"
    DOMAIN = "domain"


PORT_MIN = 1
PORT_MAX = 65_535

PUBKEY_LENGTH = 66
PUBKEY_PREFIXES = ("02", "03")

IPV6_GROUPS = 8
DOMAIN_MAX_LENGTH = 253
DOMAIN_LABEL_MAX_LENGTH = 63
