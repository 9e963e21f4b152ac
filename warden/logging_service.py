"""Logging facade.

Serialized, best-effort appends of admission decisions to the policy log.
"""

from __future__ import annotations

from warden.async_utils.fs import append_line
from warden.log_paths import POLICY_DECISIONS
from warden.state import shard_lock


async def policy_log(t: str, bin: str = POLICY_DECISIONS) -> None:
    """Append an admission decision line to the policy log."""
    async with shard_lock():
        await append_line(bin, t or "")


__all__ = [
    "policy_log",
]
