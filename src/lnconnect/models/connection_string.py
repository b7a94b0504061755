"""
Validated Lightning connection strings (``pubkey@host[:port]``).

Splits the input on its single ``@``, validates the left side as a
compressed secp256k1 public key in hex and the right side as an address,
and returns an immutable
[ParsedConnectionString][lnconnect.models.connection_string.ParsedConnectionString].
Only the length, prefix and character set of the key are checked; curve
membership is not.

Every failure raises [ParseError][lnconnect.models.errors.ParseError] with a
[ParseFailureCode][lnconnect.models.errors.ParseFailureCode]. Errors from the
address parsers are propagated unchanged.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any

from . import grammar
from .address import ParsedAddress, parse_address
from .constants import HostType
from .errors import ParseError, ParseFailureCode


@dataclass(frozen=True, slots=True)
class ParsedConnectionString:
    """Immutable, fully validated connection string.

    Safe to trust without re-validation: instances are only produced by
    [parse_connection_string()][lnconnect.models.connection_string.parse_connection_string].

    Attributes:
        pubkey: 66-character hex public key starting with ``02`` or ``03``.
        host: Host exactly as given (brackets stripped for IPv6).
        host_type: The single grammar the host matched.
        port: Port number in ``[1, 65535]``, or ``None`` when omitted.

    Examples:
        ```python
        cs = parse_connection_string(
            "0200000000a3eff613189ca6c4070c89206ad658e286751eca1f29262948247a5f@127.0.0.1:9000"
        )
        cs.host        # '127.0.0.1'
        cs.host_type   # HostType.IPV4
        cs.port        # 9000
        ```
    """

    pubkey: str
    host: str
    host_type: HostType
    port: int | None = None

    @property
    def address(self) -> ParsedAddress:
        """The ``host[:port]`` part as a [ParsedAddress][lnconnect.models.address.ParsedAddress]."""
        return ParsedAddress(host=self.host, host_type=self.host_type, port=self.port)

    def to_connection_string(self) -> str:
        """Render ``pubkey@host[:port]``, bracketing IPv6 hosts.

        Parsing the result again yields an equal instance.
        """
        return f"{self.pubkey}@{self.address.to_address()}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the parsed fields."""
        return {
            "pubkey": self.pubkey,
            "host": self.host,
            "host_type": str(self.host_type),
            "port": self.port,
        }

    def __str__(self) -> str:
        return self.to_connection_string()


def parse_pubkey(pubkey: Any) -> str:
    """Validate a hex-encoded compressed public key.

    Returns:
        The key unchanged (case preserved).

    Raises:
        ParseError: ``INVALID_PUBKEY`` unless the key is exactly 66 hex
            characters starting with ``02`` or ``03``.
    """
    if not isinstance(pubkey, str) or not grammar.is_pubkey(pubkey):
        raise ParseError("Invalid pubkey.", ParseFailureCode.INVALID_PUBKEY)
    return pubkey


def parse_connection_string(
    connection_string: str,
    *,
    port_mandatory: bool = False,
    allowed_host_types: Collection[HostType] | None = None,
) -> ParsedConnectionString:
    """Parse and validate a ``pubkey@host[:port]`` connection string.

    Args:
        connection_string: Raw connection string.
        port_mandatory: Reject connection strings without a port.
        allowed_host_types: Restrict the accepted host types. ``None``
            accepts all four.

    Returns:
        The validated
        [ParsedConnectionString][lnconnect.models.connection_string.ParsedConnectionString].

    Raises:
        ParseError: ``INVALID_ATS`` unless there is exactly one ``@`` with
            text on both sides; otherwise the first failure from the public
            key or address validation, unchanged.
    """
    if not isinstance(connection_string, str):
        raise ParseError("Connection string must be a string.", ParseFailureCode.INVALID_ATS)

    parts = connection_string.split("@")
    if len(parts) != 2 or not all(parts):
        raise ParseError(
            "@ does not split the string in two parts.", ParseFailureCode.INVALID_ATS
        )
    pubkey_part, address_part = parts

    pubkey = parse_pubkey(pubkey_part)
    address = parse_address(
        address_part,
        port_mandatory=port_mandatory,
        allowed_host_types=allowed_host_types,
    )

    return ParsedConnectionString(
        pubkey=pubkey,
        host=address.host,
        host_type=address.host_type,
        port=address.port,
    )
