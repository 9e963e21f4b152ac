import os
import sys

import pytest

# Add project root to path so warden is importable without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

_WARDEN_ENV = (
    "WARDEN_POLICY_DENY_UNPARSABLE",
    "WARDEN_LOG_DECISIONS",
    "WARDEN_POLICY_LOG",
    "WARDEN_TEMPLATES_DIR",
)


@pytest.fixture(autouse=True)
def clean_warden_env(monkeypatch):
    """Start every test from the default policy configuration."""
    for name in _WARDEN_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
