from __future__ import annotations

from typing import AbstractSet, Any, Dict, Iterable, List, Optional

from warden.contracts import ImportLike

from .allowlist import is_unsupported_import
from .deprecation import is_deprecated_package
from .package_uri import extract_package_name, parse_uri
from .tables import DART_SCHEME_PREFIX, PACKAGE_SCHEME


def _pos(imp: ImportLike, attr: str, default: int) -> int:
    try:
        return int(getattr(imp, attr, default) or default)
    except (TypeError, ValueError):
        return default


def _rejection(uri: str) -> Dict[str, str]:
    if uri.startswith(DART_SCHEME_PREFIX):
        return {"id": "unsupported_dart", "msg": f"import of '{uri}' is not allowed in the sandbox"}
    parts = parse_uri(uri)
    if parts is None:
        return {"id": "unparsable_uri", "msg": f"import '{uri}' is not a valid URI"}
    if parts.scheme == PACKAGE_SCHEME:
        name = extract_package_name(uri) or "<none>"
        return {"id": "unsupported_package", "msg": f"package '{name}' is not supported ({uri})"}
    return {"id": "unsupported_uri", "msg": f"file and network imports are not allowed ({uri})"}


def collect_violations_detailed(
    imports: Iterable[ImportLike],
    known_local: Optional[AbstractSet[str]] = None,
    *,
    deny_unparsable: Optional[bool] = None,
) -> List[Dict[str, Any]]:
    """Analyze imports and return structured findings with source positions.

    Rejections come with category ``safety``; deprecated-but-admitted
    packages with category ``advisory``. Safe to hand to logs and HTTP
    error bodies. It does not raise.
    """
    local = known_local if known_local is not None else frozenset()
    out: List[Dict[str, Any]] = []
    for imp in imports:
        uri = imp.uri
        base = {
            "line": _pos(imp, "line", 1),
            "column": _pos(imp, "column", 0),
            "uri": uri,
        }
        if is_unsupported_import(uri, local, deny_unparsable=deny_unparsable):
            out.append({**_rejection(uri or ""), "category": "safety", **base})
            continue
        name = extract_package_name(uri) if uri else None
        if name is not None and is_deprecated_package(name):
            out.append({
                "id": "deprecated_package",
                "category": "advisory",
                "msg": f"package '{name}' is deprecated and will be removed",
                **base,
            })
    return out
