from __future__ import annotations

from typing import Iterable

import dotenv


def load_env(paths: Iterable[str] | None = None) -> None:
    """Load environment variables from ``.env`` files via python-dotenv.

    Real environment variables always win (``override=False``). Without
    explicit ``paths`` the nearest ``.env`` from the working directory is used.
    """
    if paths:
        for p in paths:
            dotenv.load_dotenv(p, override=False)
        return
    found = dotenv.find_dotenv(usecwd=True)
    if found:
        dotenv.load_dotenv(found, override=False)
