# cc_import_tool/core/domain/enums.py

"""Domain enumerations for the CC import tool"""

# Standard library imports
from enum import Enum


class MatchVerdict(Enum):
    """Reconciliation outcome for one discovered creator name"""

    EXACT = "EXACT"  # Case-insensitive equal to a registry entry
    FUZZY = "FUZZY"  # Close enough to a registry entry to suggest it
    NEW = "NEW"  # No registry entry cleared the threshold


class DecisionAction(Enum):
    """What the reviewer chose to do with a discovered creator or collection"""

    NEW = "new"
    EXISTING = "existing"
