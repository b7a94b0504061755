r"""lnconnect -- Parser and validator for Lightning connection strings.

Validates ``pubkey@host[:port]`` strings used to address Lightning peers,
where the host is an IPv4 literal, an IPv6 literal (bracketed or bare), a
Tor v3 onion address or a DNS domain name. Every failure is reported with a
stable, machine-checkable code.

Imports flow strictly downward:

```text
              __main__         Command-line interface
             /        \
          core        utils    Config, logging, errors / batch helpers
             \        /
              models           Pure parsers and frozen value types
```

Note:
    For lightweight usage, import directly from subpackages::

        from lnconnect.models import parse_connection_string

    Top-level imports (``from lnconnect import parse_connection_string``)
    use lazy loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("lnconnect")

__all__ = [
    "ConfigurationError",
    "HostType",
    "LnConnectError",
    "Logger",
    "ParseError",
    "ParseFailureCode",
    "ParsedAddress",
    "ParsedConnectionString",
    "ParserConfig",
    "SplitResult",
    "parse_address",
    "parse_connection_string",
    "parse_connection_strings",
    "parse_host",
    "parse_port",
    "parse_pubkey",
    "split_host_and_port",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("lnconnect.core", "ConfigurationError"),
    "Logger": ("lnconnect.core", "Logger"),
    "ParserConfig": ("lnconnect.core", "ParserConfig"),
    "HostType": ("lnconnect.models", "HostType"),
    "LnConnectError": ("lnconnect.models", "LnConnectError"),
    "ParseError": ("lnconnect.models", "ParseError"),
    "ParseFailureCode": ("lnconnect.models", "ParseFailureCode"),
    "ParsedAddress": ("lnconnect.models", "ParsedAddress"),
    "ParsedConnectionString": ("lnconnect.models", "ParsedConnectionString"),
    "SplitResult": ("lnconnect.models", "SplitResult"),
    "parse_address": ("lnconnect.models", "parse_address"),
    "parse_connection_string": ("lnconnect.models", "parse_connection_string"),
    "parse_host": ("lnconnect.models", "parse_host"),
    "parse_port": ("lnconnect.models", "parse_port"),
    "parse_pubkey": ("lnconnect.models", "parse_pubkey"),
    "split_host_and_port": ("lnconnect.models", "split_host_and_port"),
    "parse_connection_strings": ("lnconnect.utils", "parse_connection_strings"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'lnconnect' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
