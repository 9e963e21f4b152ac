from __future__ import annotations

from typing import AbstractSet, Iterable, List, Optional, TypeVar

from warden.contracts import ImportLike

from .allowlist import is_supported_package, is_unsupported_import
from .deprecation import collect_deprecated, is_deprecated_package
from .directive import ImportDirective
from .errors import UnsupportedImportError
from .package_uri import extract_package_name, parse_uri
from .platform_usage import (
    is_firebase_import,
    is_firebase_package,
    is_flutter_web_import,
    uses_firebase,
    uses_flutter_web,
)
from .report import collect_violations_detailed

_I = TypeVar("_I", bound=ImportLike)


def collect_unsupported(
    imports: Iterable[_I],
    known_local: Optional[AbstractSet[str]] = None,
    *,
    deny_unparsable: Optional[bool] = None,
) -> List[_I]:
    """Return the imports that must be rejected, in their original order.

    ``known_local`` must already be sanitized of ``package:``/etc prefixes
    (see :func:`is_unsupported_import`). A non-empty result rejects the
    whole submission.
    """
    local = known_local if known_local is not None else frozenset()
    return [
        imp
        for imp in imports
        if is_unsupported_import(imp.uri, local, deny_unparsable=deny_unparsable)
    ]


__all__ = [
    "ImportDirective",
    "UnsupportedImportError",
    "collect_deprecated",
    "collect_unsupported",
    "collect_violations_detailed",
    "extract_package_name",
    "is_deprecated_package",
    "is_firebase_import",
    "is_firebase_package",
    "is_flutter_web_import",
    "is_supported_package",
    "is_unsupported_import",
    "parse_uri",
    "uses_firebase",
    "uses_flutter_web",
]
