from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import SplitResult, unquote, urlsplit
import re

from .tables import PACKAGE_SCHEME

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# urlsplit drops tabs/newlines and strips leading blanks; escape them first
_CONTROL_RE = re.compile(r"[\x00-\x20\x7f]")


def _escape_control(m: "re.Match[str]") -> str:
    return "%{:02X}".format(ord(m.group(0)))


def parse_uri(text: Optional[str]) -> Optional[SplitResult]:
    """Parse ``text`` as a generic URI reference; ``None`` when it is not one.

    Only malformed percent escapes, bad ports and bad IPv6 hosts make a
    string unparsable. Control characters and spaces are percent-encoded
    rather than dropped, so the parsed result always describes the exact
    string that was submitted.
    """
    if not isinstance(text, str):
        return None
    if _BAD_ESCAPE_RE.search(text):
        return None
    try:
        parts = urlsplit(_CONTROL_RE.sub(_escape_control, text))
        # port is validated lazily
        parts.port
    except ValueError:
        # unbalanced IPv6 brackets, bad port, ...
        return None
    return parts


def path_segments(parts: SplitResult) -> Tuple[str, ...]:
    """Decoded path segments; a single leading slash does not open a segment."""
    path = parts.path
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return ()
    return tuple(unquote(seg) for seg in path.split("/"))


def extract_package_name(uri: Optional[str]) -> Optional[str]:
    """If ``uri`` is a ``package:`` URI return its package name, else ``None``."""
    parts = parse_uri(uri)
    if parts is None:
        return None
    if parts.scheme != PACKAGE_SCHEME:
        return None
    segments = path_segments(parts)
    if not segments:
        return None
    return segments[0]
