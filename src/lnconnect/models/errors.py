"""Parse failure codes and the error raised by every validator.

Lives in the models layer so the pure parsers can raise it without
importing [lnconnect.core][lnconnect.core]. The rest of the hierarchy is
defined in [lnconnect.core.exceptions][lnconnect.core.exceptions].

Examples:
    ```python
    try:
        parse_connection_string(raw)
    except ParseError as e:
        if e.code == ParseFailureCode.INVALID_IPV6:
            ...  # ask the user for the bracketed form
    ```
"""

from __future__ import annotations

from enum import StrEnum


class ParseFailureCode(StrEnum):
    """Stable, machine-checkable reason attached to a [ParseError][lnconnect.models.errors.ParseError].

    Callers should branch on the code, never on the message text.

    Attributes:
        INVALID_HOST: Host matches none of the IPv4, IPv6, Tor v3 or domain
            grammars, or the host/port boundary is malformed.
        INVALID_IPV6: Compressed IPv6 host without square brackets; the
            port cannot be told apart from the last group.
        INVALID_PORT: Port is not an integer between 1 and 65535.
        INVALID_PUBKEY: Public key is not 66 hex characters starting with
            ``02`` or ``03``.
        INVALID_ATS: The ``@`` separator is missing, repeated, or has an
            empty side.
    """

    INVALID_HOST = "invalidHost"
    INVALID_IPV6 = "invalidIpv6"
    INVALID_PORT = "invalidPort"
    INVALID_PUBKEY = "invalidPubkey"
    INVALID_ATS = "invalidAts"


class LnConnectError(Exception):
    """Base exception for all lnconnect errors.

    Never raised directly -- always use a specific subclass.
    """


class ParseError(LnConnectError, ValueError):
    """A connection string, address, host, port or public key failed validation.

    Subclasses ``ValueError`` so generic ``except ValueError`` handlers keep
    working.

    Attributes:
        message: Human readable description.
        code: The [ParseFailureCode][lnconnect.models.errors.ParseFailureCode].
    """

    def __init__(self, message: str, code: ParseFailureCode) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, code={self.code.value!r})"
