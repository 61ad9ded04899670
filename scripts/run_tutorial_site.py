#!/usr/bin/env python3
"""
Tutorial Site Page Builder
==========================

Renders the Python tutorial chapters served by a local static server into
complete HTML pages with chapter navigation and highlighted code.

Usage:
    python run_tutorial_site.py                          # First chapter
    python run_tutorial_site.py --fragment '#5'          # Chapter 5
    python run_tutorial_site.py --all                    # Every chapter
    python run_tutorial_site.py --base-url http://localhost:9000/

Features:
    - Chapter list with active marker
    - Repair of code fences with the language on its own line
    - Syntax-highlighted code blocks
    - Placeholder content and banner for chapters that fail to load
"""

import sys
import os

# Ensure the scripts directory is in the path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)


def main():
    """Main entry point for the page builder."""
    from tutorial_site import run_with_args
    return run_with_args()


if __name__ == "__main__":
    sys.exit(main())
