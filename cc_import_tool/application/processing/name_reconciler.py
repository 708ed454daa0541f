# cc_import_tool/application/processing/name_reconciler.py

"""Reconciliation of discovered creator names against the known registry

Every discovered name gets exactly one verdict:

1. Exact: case-insensitively equal to a registry name (first in registry
   order wins). No confirmation needed.
2. Fuzzy candidate: the best-scoring registry entry whose similarity is
   strictly above the threshold (first seen wins ties). Needs confirmation.
3. New creator: nothing cleared the threshold. Needs confirmation.

The sentinel creator "Unknown" is never classified.
"""

# Standard library imports
from logging import getLogger
from typing import Iterable
from typing import Sequence

# Local imports
from cc_import_tool.application.processing.similarity import get_metric
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.core.domain.provenance import UNKNOWN_CREATOR
from cc_import_tool.core.types.protocols import SimilarityMetric
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)

DEFAULT_FUZZY_THRESHOLD = 0.7
DEFAULT_METRIC = "levenshtein"


class NameReconciler(ConfigurableMixin):
    """Classifies discovered creator names as exact, fuzzy candidate, or new"""

    def __init__(
        self,
        config: ConfigLoader | None = None,
        threshold: float | None = None,
        similarity: SimilarityMetric | None = None,
    ) -> None:
        """Initialize reconciler

        Args:
            config: Optional configuration loader
            threshold: Override for the fuzzy candidacy threshold
            similarity: Override for the similarity metric
        """
        self.config = self._init_config(config)
        settings = self.config.reconciliation

        self.threshold = threshold if threshold is not None else settings.fuzzy_threshold
        self.similarity = similarity or get_metric(settings.metric or DEFAULT_METRIC)
        self.sort_matches = settings.sort_matches

    def reconcile(
        self, discovered_names: Iterable[str], registry: Sequence[RegistryEntry]
    ) -> list[CreatorMatch]:
        """Produce one verdict per distinct discovered name

        Args:
            discovered_names: Creator names found in an archive
            registry: Snapshot of known creators

        Returns:
            List of CreatorMatch, sorted by found name when configured
        """
        # Deduplicate while keeping first-seen order
        names = [name for name in dict.fromkeys(discovered_names) if name != UNKNOWN_CREATOR]

        # Lower-case registry names once rather than per comparison
        lowered = [(entry, entry.name.lower()) for entry in registry]

        matches = [self._classify(name, registry, lowered) for name in names]
        if self.sort_matches:
            matches.sort(key=lambda match: match.found_name)

        logger.debug(
            f"Reconciled {len(matches)} creator names against {len(registry)} registry entries"
        )
        return matches

    def match_name(self, found_name: str, registry: Sequence[RegistryEntry]) -> CreatorMatch:
        """Classify a single name"""
        lowered = [(entry, entry.name.lower()) for entry in registry]
        return self._classify(found_name, registry, lowered)

    def _classify(
        self,
        found_name: str,
        registry: Sequence[RegistryEntry],
        lowered: list[tuple[RegistryEntry, str]],
    ) -> CreatorMatch:
        found_lower = found_name.lower()
        for entry, entry_lower in lowered:
            if entry_lower == found_lower:
                return CreatorMatch.exact(found_name, entry)

        best_entry: RegistryEntry | None = None
        best_score = self.threshold
        for entry in registry:
            score = self.similarity(found_name, entry.name)
            # Strictly greater: scores equal to the threshold are not candidates,
            # and later entries with an equal score do not displace earlier ones
            if score > best_score:
                best_entry = entry
                best_score = score

        if best_entry is None:
            logger.debug(f"No registry candidate for {found_name!r}")
            return CreatorMatch.new_creator(found_name)

        logger.debug(f"Fuzzy candidate for {found_name!r}: {best_entry.name!r} ({best_score:.3f})")
        return CreatorMatch.candidate(found_name, best_entry, best_score)
