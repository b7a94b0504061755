"""CLI entry point for lnconnect.

Validates one or more connection strings and prints one line per input.
Results go to stdout; logs go to stderr through the structured formatter.

Examples:
    ```bash
    python -m lnconnect 02...@127.0.0.1:9735
    python -m lnconnect --port-mandatory --host-type torv3 02...@abc...xyz.onion:9735
    python -m lnconnect --config lnconnect.yaml --json 02...@node.example.com
    ```

Exit codes: 0 when every input parsed, 1 when at least one was rejected,
2 for invalid arguments or configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from lnconnect.core.config import ParserConfig
from lnconnect.core.exceptions import ConfigurationError
from lnconnect.core.logger import Logger, StructuredFormatter
from lnconnect.models import HostType, ParseError
from lnconnect.utils.parsing import partition_connection_strings


EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2

logger = Logger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="lnconnect",
        description="Validate Lightning connection strings (pubkey@host[:port])",
    )

    parser.add_argument(
        "connection_strings",
        nargs="+",
        metavar="CONNECTION_STRING",
        help="Connection string(s) to validate",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Parser config YAML (port_mandatory, allowed_host_types)",
    )

    parser.add_argument(
        "--port-mandatory",
        action="store_true",
        default=None,
        help="Reject connection strings without a port (overrides config)",
    )

    parser.add_argument(
        "--host-type",
        action="append",
        choices=[t.value for t in HostType],
        dest="host_types",
        help="Accepted host type, repeatable (overrides config; default: all)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per input and log as JSON",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    return parser.parse_args(argv)


def setup_logging(level: str, *, json_output: bool = False) -> None:
    """Install a ``StructuredFormatter`` on a stderr root handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter(json_output=json_output))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def build_config(args: argparse.Namespace) -> ParserConfig:
    """Load the YAML config (if any) and apply command-line overrides.

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid.
    """
    data: dict[str, Any] = {}
    if args.config is not None:
        config = ParserConfig.from_yaml(args.config)
        logger.info("config_loaded", path=str(args.config))
        data = config.model_dump()

    if args.port_mandatory is not None:
        data["port_mandatory"] = args.port_mandatory
    if args.host_types:
        data["allowed_host_types"] = args.host_types

    return ParserConfig.from_dict(data)


def _error_line(value: str, error: ParseError) -> str:
    return f"error {error.code} {value} {error.message}"


def report(
    args: argparse.Namespace,
    config: ParserConfig,
    out: TextIO,
) -> int:
    """Parse every input and write the results to *out*.

    Returns:
        ``EXIT_OK`` if everything parsed, ``EXIT_REJECTED`` otherwise.
    """
    parsed, rejected = partition_connection_strings(args.connection_strings, config=config)
    failures = dict(rejected)
    results = iter(parsed)

    for value in args.connection_strings:
        error = failures.get(value)
        if error is not None:
            logger.warning("connection_string_rejected", code=error.code, input=value)
            if args.json:
                record = {
                    "input": value,
                    "ok": False,
                    "code": str(error.code),
                    "message": error.message,
                }
                out.write(json.dumps(record) + "\n")
            else:
                out.write(_error_line(value, error) + "\n")
            continue

        result = next(results)
        logger.debug("connection_string_parsed", host_type=result.host_type, input=value)
        if args.json:
            out.write(json.dumps({"input": value, "ok": True, **result.to_dict()}) + "\n")
        else:
            out.write(f"ok {result.host_type} {result}\n")

    return EXIT_REJECTED if rejected else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, build the config and report results."""
    args = parse_args(argv)
    setup_logging(args.log_level, json_output=args.json)

    try:
        config = build_config(args)
    except FileNotFoundError as e:
        logger.error("config_not_found", path=str(args.config), error=str(e))
        return EXIT_USAGE
    except ConfigurationError as e:
        logger.error("config_invalid", error=str(e))
        return EXIT_USAGE

    return report(args, config, sys.stdout)


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
