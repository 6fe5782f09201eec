#!/usr/bin/env python3
"""Run the ``langsync`` CLI from a source checkout.

Example::

    printf 'farewell=Goodbye\n' | scripts/sync_language_files.py update \
        ./billing/i18n/en/messages.properties
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from langsync.backend.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
