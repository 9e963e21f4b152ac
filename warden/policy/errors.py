from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class UnsupportedImportError(RuntimeError):
    """Exception raised when a submission imports something the sandbox forbids.

    Attributes
    ----------
    imports : Sequence[Any]
        The rejected import directives, in source order.
    violations : Sequence[Dict[str, Any]]
        Structured diagnostics for the rejected imports (see
        ``warden.policy.report``), suitable for pointing at source locations.
    """

    def __init__(
        self,
        message: str,
        *,
        imports: Sequence[Any],
        violations: Sequence[Dict[str, Any]] = (),
    ) -> None:
        super().__init__(message)
        self.imports: Sequence[Any] = imports
        self.violations: Sequence[Dict[str, Any]] = violations

    @property
    def uris(self) -> list[Optional[str]]:
        return [getattr(imp, "uri", None) for imp in self.imports]
