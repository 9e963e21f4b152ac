"""Admission service facade.

Thin wrapper delegating to the micro-module implementation under
``warden.micro.admission.gate`` to keep the public API stable.
"""

from __future__ import annotations

from warden.micro.admission.gate import (
    AdmissionResult as AdmissionResult,
    PlatformProfile as PlatformProfile,
    enforce_submission as enforce_submission,
    evaluate_submission as evaluate_submission,
    screen_submission as screen_submission,
)


__all__ = [
    "AdmissionResult",
    "PlatformProfile",
    "enforce_submission",
    "evaluate_submission",
    "screen_submission",
]
