#!/usr/bin/env python3
"""
Run the kata programs without installing the package.

Usage:
  python scripts/run_katas.py            # all four programs
  python scripts/run_katas.py propagate  # just one
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from katas.cli import main

if __name__ == "__main__":
    sys.exit(main())
