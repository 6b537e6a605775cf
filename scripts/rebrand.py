#!/usr/bin/env python3
"""
Rebrand Mac OS X / macOS codenames and version strings.

Usage:
    python scripts/rebrand.py --root DIR              # Preview changes
    python scripts/rebrand.py --root DIR --apply      # Apply changes
"""

import sys
from pathlib import Path

# Allow running from a checkout without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rebrand.cli import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())
