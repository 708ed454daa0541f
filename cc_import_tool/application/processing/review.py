# cc_import_tool/application/processing/review.py

"""Default decisions a reviewer starts from when confirming a scan"""

# Standard library imports
from logging import getLogger
from typing import Iterable
from typing import Sequence

# Local imports
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.decisions import CollectionDecision
from cc_import_tool.core.domain.decisions import ConfirmedMapping
from cc_import_tool.core.domain.decisions import CreatorDecision
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.enums import DecisionAction

logger = getLogger(__name__)

DEFAULT_SUGGEST_THRESHOLD = 0.8
DEFAULT_CATCH_ALL_COLLECTIONS = ("General", "Unsorted")


def collections_by_creator(items: Iterable[DiscoveredItem]) -> dict[str, list[str]]:
    """Distinct collection names per creator, in encounter order"""
    grouped: dict[str, dict[str, None]] = {}
    for item in items:
        grouped.setdefault(item.creator_name, {})[item.collection_name] = None
    return {creator: list(collections) for creator, collections in grouped.items()}


def propose_decisions(
    items: Sequence[DiscoveredItem],
    matches: Sequence[CreatorMatch],
    suggest_threshold: float = DEFAULT_SUGGEST_THRESHOLD,
    catch_all_collections: Iterable[str] = DEFAULT_CATCH_ALL_COLLECTIONS,
) -> ConfirmedMapping:
    """Build the initial mapping presented for review

    A creator whose verdict names a registry entry with similarity above
    ``suggest_threshold`` is preselected as EXISTING; every other creator
    starts as NEW under its found name. When merging into an existing
    creator, catch-all collections are renamed after the found creator
    folder so its files stay grouped.

    Args:
        items: Items discovered in the archive
        matches: Reconciliation verdicts
        suggest_threshold: Similarity above which the match is preselected
        catch_all_collections: Collection names treated as catch-alls

    Returns:
        Mapping of found creator name to CreatorDecision
    """
    catch_all = {name.lower() for name in catch_all_collections}
    collections = collections_by_creator(items)
    mapping: ConfirmedMapping = {}

    for match in matches:
        if not match.found_name.strip():
            logger.warning("Skipping blank creator name; its items stay unassigned")
            continue

        use_existing = match.existing_id is not None and match.similarity > suggest_threshold
        creator_collections = collections.get(match.found_name, [])

        collection_decisions = {}
        for collection_name in creator_collections:
            target = collection_name
            if use_existing and collection_name.lower() in catch_all:
                target = match.found_name
            collection_decisions[collection_name] = CollectionDecision(
                original_name=collection_name, action=DecisionAction.NEW, target_name=target
            )

        if use_existing:
            decision = CreatorDecision(
                found_name=match.found_name,
                action=DecisionAction.EXISTING,
                target_name=match.existing_name or match.found_name,
                target_id=match.existing_id,
                collections=collection_decisions,
            )
        else:
            decision = CreatorDecision(
                found_name=match.found_name,
                action=DecisionAction.NEW,
                target_name=match.found_name,
                collections=collection_decisions,
            )
        mapping[match.found_name] = decision

    logger.debug(
        f"Proposed {sum(1 for d in mapping.values() if d.action is DecisionAction.EXISTING)} "
        f"existing and {sum(1 for d in mapping.values() if d.action is DecisionAction.NEW)} new creators"
    )
    return mapping
