"""
Host/port splitting, host classification and port validation.

Turns the address part of a connection string (everything after the ``@``)
into a validated [ParsedAddress][lnconnect.models.address.ParsedAddress].
The work happens in three steps, each usable on its own:

1. [split_host_and_port()][lnconnect.models.address.split_host_and_port]
   separates the host candidate from the optional port candidate.
2. [parse_host()][lnconnect.models.address.parse_host] validates the host
   and tags it with a [HostType][lnconnect.models.constants.HostType].
3. [parse_port()][lnconnect.models.address.parse_port] validates the port.

Bare IPv6 literals make step 1 ambiguous: in ``2001:db8::8888:9735`` the
last group may be part of the address or a port. The splitter never guesses;
it raises ``INVALID_IPV6`` and the caller must use the bracketed form
``[2001:db8::8888]:9735``.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any, NamedTuple

from . import grammar
from .constants import IPV6_GROUPS, PORT_MAX, PORT_MIN, HostType
from .errors import ParseError, ParseFailureCode


class SplitResult(NamedTuple):
    """Unvalidated output of [split_host_and_port()][lnconnect.models.address.split_host_and_port]."""

    host: str
    port: str | None


@dataclass(frozen=True, slots=True)
class ParsedAddress:
    """Immutable, validated ``host[:port]`` address.

    Attributes:
        host: Host exactly as given (brackets stripped for IPv6).
        host_type: The single grammar the host matched.
        port: Port number in ``[1, 65535]``, or ``None`` when omitted.

    Examples:
        ```python
        addr = parse_address("[2001:db8::1]:9735")
        addr.host        # '2001:db8::1'
        addr.host_type   # HostType.IPV6
        str(addr)        # "[2001:db8::1]:9735"
        ```
    """

    host: str
    host_type: HostType
    port: int | None = None

    def to_address(self) -> str:
        """Render the address so that parsing it again yields an equal value.

        IPv6 hosts are always bracketed, since a bare compressed literal is
        rejected as ambiguous.
        """
        host = f"[{self.host}]" if self.host_type == HostType.IPV6 else self.host
        if self.port is None:
            return host
        return f"{host}:{self.port}"

    def __str__(self) -> str:
        return self.to_address()


def split_host_and_port(address: str) -> SplitResult:
    """Separate an address into host and port candidates.

    Rules, in order of precedence:

    * ``[content]`` or ``[content]:port`` -- the content is the host.
    * zero or one colon -- split once on the colon.
    * several colons, no ``::`` -- an uncompressed IPv6 literal. Eight
      groups are the host; a ninth group is the port.
    * several colons with ``::`` -- ambiguous, rejected.

    Args:
        address: Raw ``host[:port]`` string.

    Returns:
        A [SplitResult][lnconnect.models.address.SplitResult] whose fields
        are still unvalidated.

    Raises:
        ParseError: ``INVALID_HOST`` for a malformed boundary (trailing bare
            colon, IPv6 with other than 8 or 9 groups, non-string input);
            ``INVALID_IPV6`` for a compressed IPv6 literal without brackets.
    """
    if not isinstance(address, str):
        raise ParseError("Invalid host.", ParseFailureCode.INVALID_HOST)

    bracketed = grammar.BRACKETED_ADDRESS.fullmatch(address)
    if bracketed:
        return _checked(bracketed.group("content"), bracketed.group("port"))

    colon_count = address.count(":")
    if colon_count <= 1:
        host, _, port = address.partition(":")
        return _checked(host, port if colon_count else None)

    if "::" not in address:
        groups = address.split(":")
        if not IPV6_GROUPS <= len(groups) <= IPV6_GROUPS + 1:
            raise ParseError("Invalid host. Invalid ipv6?", ParseFailureCode.INVALID_HOST)
        port = groups[IPV6_GROUPS] if len(groups) > IPV6_GROUPS else None
        return _checked(":".join(groups[:IPV6_GROUPS]), port)

    raise ParseError(
        "Compressed ipv6 host without square brackets []", ParseFailureCode.INVALID_IPV6
    )


def _checked(host: str, port: str | None) -> SplitResult:
    # A separator with nothing after it is a broken boundary, not a missing port.
    if port == "":
        raise ParseError("Invalid host. Trailing colon without port.", ParseFailureCode.INVALID_HOST)
    return SplitResult(host, port)


def parse_host(host: Any) -> tuple[str, HostType]:
    """Validate a host candidate and classify it.

    Grammars are tried in order IPv4, IPv6, Tor v3, domain; the first
    full match decides the type.

    Returns:
        ``(host, host_type)`` with the host echoed unchanged.

    Raises:
        ParseError: ``INVALID_HOST`` if no grammar matches.
    """
    if isinstance(host, str):
        if grammar.is_ipv4(host):
            return host, HostType.IPV4
        if grammar.is_ipv6(host):
            return host, HostType.IPV6
        if grammar.is_torv3(host):
            return host, HostType.TORV3
        if grammar.is_domain(host):
            return host, HostType.DOMAIN
    raise ParseError("Invalid host.", ParseFailureCode.INVALID_HOST)


def parse_port(port: str | None) -> int | None:
    """Validate an optional port candidate.

    ``None`` means no port was given and is returned as is. Anything else
    must be plain ASCII digits with a value between 1 and 65535; signs,
    whitespace and the empty string are rejected.

    Raises:
        ParseError: ``INVALID_PORT`` for any other input.
    """
    if port is None:
        return None
    if not isinstance(port, str) or not grammar.is_port(port):
        raise ParseError("Invalid port.", ParseFailureCode.INVALID_PORT)
    # Leading zeros are allowed, so only significant digits count toward the limit.
    digits = port.lstrip("0")
    if len(digits) > len(str(PORT_MAX)):
        raise ParseError("Invalid port.", ParseFailureCode.INVALID_PORT)
    value = int(digits or "0")
    if not PORT_MIN <= value <= PORT_MAX:
        raise ParseError("Invalid port.", ParseFailureCode.INVALID_PORT)
    return value


def parse_address(
    address: str,
    *,
    port_mandatory: bool = False,
    allowed_host_types: Collection[HostType] | None = None,
) -> ParsedAddress:
    """Parse and validate a ``host[:port]`` address.

    Args:
        address: Raw address string.
        port_mandatory: Reject addresses without a port.
        allowed_host_types: Restrict the accepted host types. ``None``
            accepts all four.

    Returns:
        The validated [ParsedAddress][lnconnect.models.address.ParsedAddress].

    Raises:
        ParseError: The first failure from splitting, host or port
            validation, unchanged.
    """
    split = split_host_and_port(address)
    host, host_type = parse_host(split.host)
    if allowed_host_types is not None and host_type not in allowed_host_types:
        raise ParseError(f"Host type not allowed: {host_type}", ParseFailureCode.INVALID_HOST)

    port = parse_port(split.port)
    if port is None and port_mandatory:
        raise ParseError("Port is required.", ParseFailureCode.INVALID_PORT)

    return ParsedAddress(host=host, host_type=host_type, port=port)
