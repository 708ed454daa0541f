# cc_import_tool/infrastructure/logging/__init__.py

"""Logging infrastructure for the CC import tool.

This module provides centralized logging configuration, run summaries,
and the CLI progress display.
"""

# Local imports
from cc_import_tool.infrastructure.logging._progress import ProgressBarManager
from cc_import_tool.infrastructure.logging._progress import log_phase_header
from cc_import_tool.infrastructure.logging._setup import get_default_log_path
from cc_import_tool.infrastructure.logging._setup import log_run_summary
from cc_import_tool.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = [
    "ProgressBarManager",
    "get_default_log_path",
    "log_phase_header",
    "log_run_summary",
    "setup_logging",
]
