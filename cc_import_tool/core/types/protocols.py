# cc_import_tool/core/types/protocols.py

"""Protocol definitions for the pipeline's seams and external collaborators"""

# Standard library imports
from pathlib import Path
from typing import Callable
from typing import Iterable
from typing import Protocol
from typing import Sequence
from typing import TYPE_CHECKING

# Local imports
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.core.domain.discovered_item import KnownItem

if TYPE_CHECKING:
    # Local imports
    from cc_import_tool.application.models.import_plan import ImportPlan
    from cc_import_tool.application.models.scan_result import ScanResult


# Type alias for CSV row data
type CSVRow = list[str | int | float | bool | None]

# Similarity metric: two names in, score in [0, 1] out
type SimilarityMetric = Callable[[str, str], float]

# Called with the running item count after each accepted entry
type EntryCallback = Callable[[int], None]


# ============================================================================
# External Library Protocols
# ============================================================================


class CSVWriter(Protocol):
    """Protocol for CSV writer objects."""

    def writerow(self, row: CSVRow) -> None: ...
    def writerows(self, rows: list[CSVRow]) -> None: ...


# ============================================================================
# Pipeline Protocols
# ============================================================================


class ArchiveScannerProtocol(Protocol):
    """Protocol for archive walkers."""

    async def scan(self, archive_path: Path | str) -> "ScanResult": ...


class ReconcilerProtocol(Protocol):
    """Protocol for creator name reconcilers."""

    def reconcile(
        self, discovered_names: Iterable[str], registry: Sequence[RegistryEntry]
    ) -> list[CreatorMatch]: ...


# ============================================================================
# External Collaborator Protocols
# ============================================================================


class RegistryProvider(Protocol):
    """Persistence-side source of the registry snapshot."""

    def list_creators(self) -> list[RegistryEntry]: ...
    def list_known_items(self) -> list[KnownItem]: ...


class ImportSink(Protocol):
    """Persistence-side consumer of a confirmed import plan.

    Implementations must insert idempotently on the plan's natural keys.
    """

    def apply(self, plan: "ImportPlan") -> None: ...
