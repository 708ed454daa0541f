#!/usr/bin/env python3
"""
Custom Content Import Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m cc_import_tool
"""

# Local imports
from cc_import_tool.adapters.cli.main import main

if __name__ == "__main__":
    main()
