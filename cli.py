#!/usr/bin/env python3
"""
reqline launcher.

Runs the CLI from a source checkout without installing it.

Usage:
    python cli.py --help
    python cli.py get https://httpbin.org/get
    python cli.py post https://httpbin.org/post name=alice
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from reqline.cli.main import app

if __name__ == "__main__":
    app()
