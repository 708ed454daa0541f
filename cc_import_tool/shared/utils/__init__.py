# cc_import_tool/shared/utils/__init__.py

"""Shared system utilities"""

# Local imports
from cc_import_tool.shared.utils.memory_utils import MemoryMonitor

__all__ = ["MemoryMonitor"]
