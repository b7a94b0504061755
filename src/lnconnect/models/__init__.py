"""Pure parsers and frozen value types for Lightning connection strings.

The models layer is the foundation of the package. It has **no dependencies**
on any other lnconnect package -- only the Python standard library. Every
function is synchronous and side-effect free, and every value type uses
``@dataclass(frozen=True, slots=True)`` or ``NamedTuple``, so results can be
shared across threads without coordination.

Attributes:
    parse_connection_string: Validate ``pubkey@host[:port]`` into a
        [ParsedConnectionString][lnconnect.models.connection_string.ParsedConnectionString].
    parse_address: Validate ``host[:port]`` into a
        [ParsedAddress][lnconnect.models.address.ParsedAddress].
    split_host_and_port: Separate host and port candidates, refusing to
        guess for bare compressed IPv6.
    parse_host: Classify a host as IPv4, IPv6, Tor v3 or domain.
    parse_port: Validate an optional port in ``[1, 65535]``.
    parse_pubkey: Validate a 66-character ``02``/``03`` hex public key.
    ParseError: Raised by every parser, carrying a
        [ParseFailureCode][lnconnect.models.errors.ParseFailureCode].

See Also:
    [lnconnect.models.grammar][]: The exact grammars behind each check.
    [lnconnect.core.config][]: Pydantic wrapper for the strictness options.
"""

from .address import (
    ParsedAddress,
    SplitResult,
    parse_address,
    parse_host,
    parse_port,
    split_host_and_port,
)
from .connection_string import (
    ParsedConnectionString,
    parse_connection_string,
    parse_pubkey,
)
from .constants import PORT_MAX, PORT_MIN, PUBKEY_LENGTH, HostType
from .errors import LnConnectError, ParseError, ParseFailureCode


__all__ = [
    "PORT_MAX",
    "PORT_MIN",
    "PUBKEY_LENGTH",
    "HostType",
    "LnConnectError",
    "ParseError",
    "ParseFailureCode",
    "ParsedAddress",
    "ParsedConnectionString",
    "SplitResult",
    "parse_address",
    "parse_connection_string",
    "parse_host",
    "parse_port",
    "parse_pubkey",
    "split_host_and_port",
]
