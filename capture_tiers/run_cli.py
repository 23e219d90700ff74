#!/usr/bin/env python3
"""
Run the capture-tiers command line from a source checkout without installing it.

  python capture_tiers/run_cli.py picture-size 4000x3000 2000x1500 1000x750 --tier small
"""

import sys
import os

# Make the sibling src/ directory importable as the "src" package
current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, current_dir)

from src.app_cli import app

if __name__ == "__main__":
    app()
