"""Command-line entrypoint.

Screens a list of import URIs the way the execution service does and prints
the decision as JSON. Exit status is 1 when any import is rejected.

    python -m warden package:flutter/material.dart dart:io
    python -m warden --local helper.dart helper.dart < more_uris.txt
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from warden.admission_service import screen_submission
from warden.bootstrap.env import load_env
from warden.policy import ImportDirective
from warden.settings import Settings


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="warden", description="Check import URIs against the sandbox policy.")
    ap.add_argument("uris", nargs="*", help="import URIs; read one per line from stdin when omitted")
    ap.add_argument("--local", action="append", default=[], help="sanitized sibling filename (repeatable)")
    ap.add_argument("--env-file", action="append", default=None, help=".env file to load")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    load_env(args.env_file)
    raw = args.uris or [line.strip() for line in sys.stdin if line.strip()]
    imports = [ImportDirective(uri=u, line=i) for i, u in enumerate(raw, start=1)]
    result = asyncio.run(screen_submission(imports, frozenset(args.local), settings=Settings.from_env()))
    print(json.dumps({
        "admitted": result.admitted,
        "profile": result.profile.name,
        "template": result.profile.template_path(),
        "summary": result.profile.summary_path(),
        "violations": result.violations,
    }, indent=2))
    return 0 if result.admitted else 1


if __name__ == "__main__":
    sys.exit(main())
