# cc_import_tool/application/processing/import_planner.py

"""Turns a confirmed mapping into an idempotent import plan

Creators, collections and items are deduplicated on their natural keys so
applying the plan twice, or importing the same archive again, cannot
produce duplicate rows:

- creator: registry id for EXISTING, target name for NEW
- collection: (creator, collection name)
- item: (creator, collection name, file name)
"""

# Standard library imports
from logging import getLogger
from typing import Iterable

# Local imports
from cc_import_tool.application.models.import_plan import CreatorKey
from cc_import_tool.application.models.import_plan import ImportPlan
from cc_import_tool.application.models.import_plan import PlannedCollection
from cc_import_tool.application.models.import_plan import PlannedCreator
from cc_import_tool.application.models.import_plan import PlannedItem
from cc_import_tool.core.domain.decisions import ConfirmedMapping
from cc_import_tool.core.domain.discovered_item import DiscoveredItem

logger = getLogger(__name__)


def build_import_plan(items: Iterable[DiscoveredItem], mapping: ConfirmedMapping) -> ImportPlan:
    """Resolve every discovered item to its target creator and collection

    Args:
        items: Items discovered in the archive
        mapping: Confirmed decisions keyed by found creator name

    Returns:
        ImportPlan with unique creators, collections and items
    """
    creators: dict[CreatorKey, PlannedCreator] = {}
    collections: dict[tuple[CreatorKey, str], PlannedCollection] = {}
    planned_items: dict[tuple[CreatorKey, str, str], PlannedItem] = {}
    unassigned: list[DiscoveredItem] = []
    duplicate_count = 0

    for item in items:
        decision = mapping.get(item.creator_name)
        if decision is None:
            unassigned.append(item)
            continue

        creator = PlannedCreator(
            action=decision.action,
            name=decision.target_name,
            existing_id=decision.target_id,
            found_names=(decision.found_name,),
        )
        known = creators.get(creator.key)
        if known is None:
            creators[creator.key] = creator
        elif decision.found_name not in known.found_names:
            creators[creator.key] = known.model_copy(
                update={"found_names": known.found_names + (decision.found_name,)}
            )

        collection = PlannedCollection(
            creator_key=creator.key, name=decision.collection_target(item.collection_name)
        )
        collections.setdefault(collection.key, collection)

        planned = PlannedItem(
            creator_key=creator.key, collection_name=collection.name, file_name=item.file_name
        )
        if planned.key in planned_items:
            duplicate_count += 1
            continue
        planned_items[planned.key] = planned

    plan = ImportPlan(
        creators=list(creators.values()),
        collections=list(collections.values()),
        items=list(planned_items.values()),
        unassigned_items=unassigned,
        duplicate_count=duplicate_count,
    )

    if unassigned:
        logger.warning(f"{len(unassigned):,} items have no creator decision and will not be imported")
    logger.info(
        f"Import plan: {len(plan.creators)} creators, {len(plan.collections)} collections, "
        f"{len(plan.items):,} items"
    )
    return plan
