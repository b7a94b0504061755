"""Configuration, logging and error infrastructure.

Sits above ``lnconnect.models`` and below the CLI. Nothing here changes what
the parsers accept; it only wires options, output and errors around them.

Attributes:
    ParserConfig: Frozen Pydantic model holding the strictness options, with
        YAML and dict factories. See [ParserConfig][lnconnect.core.config.ParserConfig].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][lnconnect.core.logger.Logger].
    ConfigurationError: Raised for invalid configuration input.
    YAML: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][lnconnect.core.yaml.load_yaml].
"""

from .config import ParserConfig
from .exceptions import ConfigurationError, LnConnectError, ParseError, ParseFailureCode
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "LnConnectError",
    "Logger",
    "ParseError",
    "ParseFailureCode",
    "ParserConfig",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
