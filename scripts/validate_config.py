#!/usr/bin/env python3
"""Check rules.yaml for consistency problems from a plain checkout."""

from __future__ import annotations

import sys
from pathlib import Path

# Running from a checkout: put src/ on the path the same way tests/conftest.py does.
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from rupeewise.backend.config.validator import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
