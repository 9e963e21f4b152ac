from __future__ import annotations

from typing import Iterable, Optional

from warden.contracts import ImportLike

from .package_uri import extract_package_name
from .tables import (
    DART_UI_IMPORT,
    FIREBASE_PACKAGES,
    FIREBASE_PACKAGE_PREFIXES,
    PACKAGES_INDICATING_FLUTTER,
)


def is_flutter_web_import(uri: Optional[str]) -> bool:
    """Whether ``uri`` is an import that denotes use of Flutter Web."""
    if uri is None:
        return False
    if uri == DART_UI_IMPORT:
        return True
    name = extract_package_name(uri)
    return name is not None and name in PACKAGES_INDICATING_FLUTTER


def is_firebase_package(name: str) -> bool:
    if name in FIREBASE_PACKAGES:
        return True
    return name.startswith(FIREBASE_PACKAGE_PREFIXES)


def is_firebase_import(uri: Optional[str]) -> bool:
    name = extract_package_name(uri) if uri else None
    return name is not None and is_firebase_package(name)


def uses_flutter_web(imports: Iterable[ImportLike]) -> bool:
    """Return whether ``imports`` denote use of Flutter Web."""
    return any(is_flutter_web_import(imp.uri) for imp in imports)


def uses_firebase(imports: Iterable[ImportLike]) -> bool:
    """Return whether ``imports`` denote use of a Firebase backend."""
    return any(is_firebase_import(imp.uri) for imp in imports)
