from __future__ import annotations

"""
Centralized runtime settings for the import warden.

Values are resolved from environment variables with safe defaults. Loading
``.env`` files is handled separately by ``warden.bootstrap.env.load_env()``.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional
import os

from warden.log_paths import POLICY_DECISIONS


def _is_on(val: Optional[str]) -> bool:
    return (val or "0").strip().lower() in {"1", "true", "yes", "on"}


def _default_templates_dir() -> str:
    return os.path.join(os.getcwd(), "project_templates")


@dataclass(slots=True)
class PolicySettings:
    deny_unparsable: bool = False
    log_decisions: bool = True


@dataclass(slots=True)
class LogSettings:
    policy_log_path: str = POLICY_DECISIONS


@dataclass(slots=True)
class Settings:
    templates_dir: str = field(default_factory=_default_templates_dir)
    policy: PolicySettings = field(default_factory=PolicySettings)
    log: LogSettings = field(default_factory=LogSettings)

    @staticmethod
    def from_env(overrides: Optional[Dict[str, Any]] = None) -> "Settings":
        o: Dict[str, Any] = overrides or {}
        s = Settings(
            templates_dir=str(
                o.get("templates_dir", os.getenv("WARDEN_TEMPLATES_DIR", "")) or ""
            ) or _default_templates_dir(),
        )
        p = s.policy
        p.deny_unparsable = bool(
            _is_on(str(o.get("deny_unparsable", os.getenv("WARDEN_POLICY_DENY_UNPARSABLE", "0"))))
        )
        p.log_decisions = bool(
            _is_on(str(o.get("log_decisions", os.getenv("WARDEN_LOG_DECISIONS", "1"))))
        )
        s.log.policy_log_path = str(
            o.get("policy_log_path", os.getenv("WARDEN_POLICY_LOG", "")) or ""
        ) or POLICY_DECISIONS
        return s

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
