from __future__ import annotations

import os

# Admission decisions (one line per screened submission)
POLICY_DECISIONS: str = os.path.join("log", "policy_decisions.txt")
