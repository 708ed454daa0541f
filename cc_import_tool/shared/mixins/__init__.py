# cc_import_tool/shared/mixins/__init__.py

"""Shared mixins for cross-cutting concerns"""

# Local imports
from cc_import_tool.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
