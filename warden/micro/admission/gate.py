from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import AbstractSet, Any, Dict, Iterable, List, Optional, Sequence
import json

from warden.contracts import ImportLike
from warden.logging_service import policy_log
from warden.policy import (
    UnsupportedImportError,
    collect_deprecated,
    collect_unsupported,
    collect_violations_detailed,
    uses_firebase,
    uses_flutter_web,
)
from warden.settings import Settings
from warden.templates import ProjectTemplates, project_templates


@dataclass(frozen=True, slots=True)
class PlatformProfile:
    uses_flutter: bool = False
    uses_firebase: bool = False

    @classmethod
    def detect(cls, imports: Sequence[ImportLike]) -> "PlatformProfile":
        return cls(uses_flutter=uses_flutter_web(imports), uses_firebase=uses_firebase(imports))

    @property
    def name(self) -> str:
        if not self.uses_flutter:
            return "dart"
        return "flutter_firebase" if self.uses_firebase else "flutter"

    def template_path(self, templates: Optional[ProjectTemplates] = None) -> str:
        return (templates or project_templates()).template_path_for(self)

    def summary_path(self, templates: Optional[ProjectTemplates] = None) -> Optional[str]:
        return (templates or project_templates()).summary_path_for(self)


@dataclass(frozen=True, slots=True)
class AdmissionResult:
    profile: PlatformProfile
    unsupported: List[Any] = field(default_factory=list)
    deprecated: List[Any] = field(default_factory=list)
    violations: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def admitted(self) -> bool:
        return not self.unsupported


def evaluate_submission(
    imports: Iterable[ImportLike],
    known_local: Optional[AbstractSet[str]] = None,
    *,
    deny_unparsable: Optional[bool] = None,
) -> AdmissionResult:
    """Run platform detection and admission checks over one submission.

    Pure: no logging, no I/O. ``deny_unparsable`` falls back to the
    ``WARDEN_POLICY_DENY_UNPARSABLE`` switch when left as ``None``.
    """
    items = list(imports)
    return AdmissionResult(
        profile=PlatformProfile.detect(items),
        unsupported=collect_unsupported(items, known_local, deny_unparsable=deny_unparsable),
        deprecated=collect_deprecated(items),
        violations=collect_violations_detailed(items, known_local, deny_unparsable=deny_unparsable),
    )


def format_decision(result: AdmissionResult) -> str:
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    decision = "ADMIT" if result.admitted else "REJECT"
    unsupported = json.dumps([getattr(i, "uri", None) for i in result.unsupported])
    deprecated = json.dumps([getattr(i, "uri", None) for i in result.deprecated])
    return f"{ts} {decision} profile={result.profile.name} unsupported={unsupported} deprecated={deprecated}"


async def screen_submission(
    imports: Iterable[ImportLike],
    known_local: Optional[AbstractSet[str]] = None,
    *,
    settings: Optional[Settings] = None,
) -> AdmissionResult:
    """Evaluate a submission and record the decision in the policy log."""
    s = settings or Settings.from_env()
    result = evaluate_submission(imports, known_local, deny_unparsable=s.policy.deny_unparsable)
    if s.policy.log_decisions:
        await policy_log(format_decision(result), s.log.policy_log_path)
    return result


async def enforce_submission(
    imports: Iterable[ImportLike],
    known_local: Optional[AbstractSet[str]] = None,
    *,
    settings: Optional[Settings] = None,
) -> AdmissionResult:
    """Like :func:`screen_submission` but raise when anything is rejected."""
    result = await screen_submission(imports, known_local, settings=settings)
    if not result.admitted:
        bad = [v for v in result.violations if v.get("category") == "safety"]
        joined = ", ".join(str(getattr(i, "uri", None)) for i in result.unsupported)
        raise UnsupportedImportError(
            f"Unsupported imports: {joined}",
            imports=result.unsupported,
            violations=bad,
        )
    return result
