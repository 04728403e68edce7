"""
Main entry point for running the package as a module.

Usage:
    python -m create_thumbnail photo.jpg --out-dir thumbs --width 200
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
