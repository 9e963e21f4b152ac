"""Service contracts (protocols) for the import warden.

Lightweight Protocols describing what the policy engine expects from its
collaborators. The import parser lives outside this package; anything
satisfying these contracts can be plugged in.
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ImportLike(Protocol):
    """A parsed import declaration.

    ``uri`` is the raw import target exactly as written in the source, or
    ``None`` when the parser could not resolve it to a string literal.
    """

    @property
    def uri(self) -> Optional[str]:  # pragma: no cover - protocol signature
        ...
