from __future__ import annotations

from typing import AbstractSet, Optional

from .config import deny_unparsable_default
from .package_uri import parse_uri, path_segments
from .tables import (
    ALLOWED_DART_IMPORTS,
    DART_SCHEME_PREFIX,
    PACKAGE_SCHEME,
    PACKAGES_INDICATING_FLUTTER,
    SUPPORTED_BASIC_DART_PACKAGES,
)


def is_supported_package(package: str) -> bool:
    return package in PACKAGES_INDICATING_FLUTTER or package in SUPPORTED_BASIC_DART_PACKAGES


def is_unsupported_import(
    uri: Optional[str],
    known_local: AbstractSet[str] = frozenset(),
    *,
    deny_unparsable: Optional[bool] = None,
) -> bool:
    """Whether the import ``uri`` must be rejected.

    ``known_local`` holds the filenames of the other files in the same
    submission. They arrive already stripped of ``package:`` (and any other
    scheme) by the ingestion layer, so the set cannot be used to smuggle a
    package import past the checks below.

    The guards run in order; each one assumes the previous ones did not apply.
    """
    if not uri:
        return False
    # Only the listed non-VM `dart:` libraries are ok.
    if uri.startswith(DART_SCHEME_PREFIX):
        return uri not in ALLOWED_DART_IMPORTS
    # Sibling files of this submission.
    if uri in known_local:
        return False

    parts = parse_uri(uri)
    if parts is None:
        if deny_unparsable is None:
            deny_unparsable = deny_unparsable_default()
        return deny_unparsable

    # A specific set of package imports is allowed.
    if parts.scheme == PACKAGE_SCHEME:
        segments = path_segments(parts)
        if not segments:
            return True
        return not is_supported_package(segments[0])

    # No file, network or other imports.
    return True
