from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ImportDirective:
    """Concrete import declaration handed over by the source parser.

    ``line`` is 1-based and ``column`` 0-based, like ``ast`` node positions.
    """

    uri: Optional[str]
    line: int = 1
    column: int = 0
