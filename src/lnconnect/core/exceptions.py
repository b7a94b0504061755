"""lnconnect exception hierarchy.

The base class and [ParseError][lnconnect.models.errors.ParseError] live in
the models layer so the pure parsers can raise them; this module adds the
errors of the configuration layer and re-exports the whole tree.

Exception hierarchy:

```text
LnConnectError (base -- never raised directly)
├── ParseError           -- validation failure, carries a ParseFailureCode
└── ConfigurationError   -- config validation, missing keys, bad YAML
```

See Also:
    [ParserConfig][lnconnect.core.config.ParserConfig]: Raises
        [ConfigurationError][lnconnect.core.exceptions.ConfigurationError]
        when its input does not validate.
"""

from __future__ import annotations

from lnconnect.models.errors import LnConnectError, ParseError, ParseFailureCode


class ConfigurationError(LnConnectError):
    """Invalid or missing configuration (YAML file, dict, CLI flags)."""


__all__ = [
    "ConfigurationError",
    "LnConnectError",
    "ParseError",
    "ParseFailureCode",
]
