#!/usr/bin/env python3
"""
swiftline - Main Entry Point

This module allows the package to be run as a script:
    python -m swiftline
"""

# Local imports
from swiftline.adapters.cli.main import main

if __name__ == "__main__":
    main()
