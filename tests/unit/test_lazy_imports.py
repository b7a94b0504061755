"""Tests for lazy import system in lnconnect.__init__."""

from __future__ import annotations

import subprocess
import sys

import pytest


class TestLazyImports:
    """Test PEP 562 lazy loading in lnconnect.__init__."""

    def test_lazy_import_does_not_eagerly_load(self) -> None:
        """Importing lnconnect does not load subpackages (checked in a fresh interpreter)."""
        code = (
            "import sys, lnconnect; "
            "print(any(m.startswith(('lnconnect.core', 'lnconnect.models')) for m in sys.modules))"
        )
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, check=True
        )
        assert result.stdout.strip() == "False"

    def test_lazy_import_resolves_on_access(self) -> None:
        from lnconnect import parse_connection_string
        from lnconnect.models.connection_string import (
            parse_connection_string as direct_parse_connection_string,
        )

        assert parse_connection_string is direct_parse_connection_string

    def test_lazy_import_caches_after_first_access(self) -> None:
        import lnconnect

        first = lnconnect.ParserConfig
        assert "ParserConfig" in vars(lnconnect)
        assert lnconnect.ParserConfig is first

    def test_unknown_attribute_raises(self) -> None:
        import lnconnect

        with pytest.raises(AttributeError, match="no attribute 'Nonexistent'"):
            _ = lnconnect.Nonexistent  # type: ignore[attr-defined]

    def test_all_names_resolve(self) -> None:
        import lnconnect

        for name in lnconnect.__all__:
            assert getattr(lnconnect, name) is not None

    def test_version(self) -> None:
        import lnconnect

        assert isinstance(lnconnect.__version__, str)
