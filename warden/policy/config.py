from __future__ import annotations

import os
from typing import Optional

_TRUE_SET = {"1", "true", "on", "yes", "y"}
_FALSE_SET = {"0", "false", "off", "no", "n", ""}


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def env_bool(name: str, default: bool) -> bool:
    v = _norm(os.getenv(name))
    if v in _TRUE_SET:
        return True
    if v in _FALSE_SET:
        return False
    return bool(default)


def is_enabled(policy_key: str, default: bool = False) -> bool:
    """Check whether an optional policy switch is on.

    Uses env var: WARDEN_POLICY_<KEY>
    - KEY should be uppercase with non-alnum replaced by underscores.
    - Read on every call so tests and long-lived workers see env changes.
    """
    key = "WARDEN_POLICY_" + "".join(ch if ch.isalnum() else "_" for ch in policy_key.upper())
    return env_bool(key, default)


def deny_unparsable_default() -> bool:
    # Strings the URI parser rejects are admitted unless this switch is on.
    return is_enabled("deny_unparsable", False)
