"""
Parser strictness options as a validated Pydantic model.

[ParserConfig][lnconnect.core.config.ParserConfig] bundles the keyword
options accepted by
[parse_connection_string()][lnconnect.models.connection_string.parse_connection_string]
and [parse_address()][lnconnect.models.address.parse_address] so they can
be loaded from YAML and passed around explicitly. The defaults reproduce
the unrestricted behavior of the bare functions.

Examples:
    ```yaml
    # lnconnect.yaml
    port_mandatory: true
    allowed_host_types: [ipv4, ipv6, torv3]
    ```

    ```python
    config = ParserConfig.from_yaml("lnconnect.yaml")
    config.parse("02...@node.example.com")   # ParseError(code='invalidHost')
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lnconnect.models import (
    HostType,
    ParsedAddress,
    ParsedConnectionString,
    parse_address,
    parse_connection_string,
)

from .exceptions import ConfigurationError
from .yaml import load_yaml


class ParserConfig(BaseModel):
    """Strictness options for connection string parsing.

    Attributes:
        port_mandatory: Reject inputs that omit the port.
        allowed_host_types: Host types to accept. Defaults to all four;
            must not be empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    port_mandatory: bool = Field(
        default=False,
        description="Reject connection strings without an explicit port",
    )
    allowed_host_types: frozenset[HostType] = Field(
        default=frozenset(HostType),
        min_length=1,
        description="Host types accepted after classification",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a config from a plain mapping.

        Raises:
            ConfigurationError: If the mapping does not validate.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid parser configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Build a config from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the YAML is malformed or does not validate.
        """
        try:
            data = load_yaml(config_path)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {config_path}")
        return cls.from_dict(data)

    @property
    def restricts_host_types(self) -> bool:
        """True when at least one host type is excluded."""
        return self.allowed_host_types != frozenset(HostType)

    def parse(self, connection_string: str) -> ParsedConnectionString:
        """Parse a connection string with these options applied."""
        return parse_connection_string(
            connection_string,
            port_mandatory=self.port_mandatory,
            allowed_host_types=self.allowed_host_types if self.restricts_host_types else None,
        )

    def parse_address(self, address: str) -> ParsedAddress:
        """Parse a ``host[:port]`` address with these options applied."""
        return parse_address(
            address,
            port_mandatory=self.port_mandatory,
            allowed_host_types=self.allowed_host_types if self.restricts_host_types else None,
        )
