from __future__ import annotations

import os

import aiofiles


async def append_line(path: str, text: str) -> None:
    """Append a single line to a log file, creating it if needed."""
    try:
        # Ensure directory exists
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        async with aiofiles.open(path, "a", encoding="utf-8") as f:
            await f.write((text or "") + "\n")
    except OSError:
        # Best-effort semantics
        pass
