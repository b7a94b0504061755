"""
Pytest configuration and shared fixtures for lnconnect tests.

Provides:
- Logging configuration
- Sample public keys, hosts and connection strings
"""

import logging

import pytest


# ============================================================================
# Sample Data
# ============================================================================

# Compressed secp256k1 public keys in hex (02/03 prefix, 66 chars)
PUBKEY_02 = "0200000000a3eff613189ca6c4070c89206ad658e286751eca1f29262948247a5f"
PUBKEY_03 = "0300000000a3eff613189ca6c4070c89206ad658e286751eca1f29262948247a5f"

ONION_V3 = "gwdllz5g7vky2q4gr45zguvoajzf33czreca3a3exosftx72ekppkuqd.onion"
IPV6_FULL = "2001:db8:3333:4444:5555:6666:7777:8888"
IPV6_COMPRESSED = "2001:db8:3333:4444:5555::8888"


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def pubkey() -> str:
    return PUBKEY_02


@pytest.fixture
def connection_string() -> str:
    return f"{PUBKEY_02}@127.0.0.1:9000"
