from __future__ import annotations

from typing import Iterable, List, TypeVar

from warden.contracts import ImportLike

from .package_uri import extract_package_name
from .tables import DEPRECATED_PACKAGES

_I = TypeVar("_I", bound=ImportLike)


def is_deprecated_package(name: str) -> bool:
    """Advisory only: deprecated packages are still admitted."""
    return name in DEPRECATED_PACKAGES


def collect_deprecated(imports: Iterable[_I]) -> List[_I]:
    out: List[_I] = []
    for imp in imports:
        name = extract_package_name(imp.uri) if imp.uri else None
        if name is not None and is_deprecated_package(name):
            out.append(imp)
    return out
