# tests/unit/application/processing/test_review_and_planning.py

"""Tests for duplicate detection, default review decisions, and import planning"""

# Third party imports
import pytest

# Local imports
from cc_import_tool.application.processing.duplicate_detector import find_duplicates
from cc_import_tool.application.processing.import_planner import build_import_plan
from cc_import_tool.application.processing.review import collections_by_creator
from cc_import_tool.application.processing.review import propose_decisions
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.core.domain.decisions import CreatorDecision
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.discovered_item import KnownItem
from cc_import_tool.core.domain.enums import DecisionAction


def item(creator: str, collection: str, file_name: str) -> DiscoveredItem:
    return DiscoveredItem(creator_name=creator, collection_name=collection, file_name=file_name)


JANE = RegistryEntry(id="1", name="JaneDoe")


@pytest.fixture
def items() -> list[DiscoveredItem]:
    return [
        item("JaneDo", "Kitchen Set", "table.package"),
        item("JaneDo", "General", "chair.package"),
        item("BobBuilder", "Bathroom", "tub.package"),
        item("BobBuilder", "General", "sink.package"),
        item("Unknown", "General", "loose.package"),
    ]


@pytest.fixture
def matches() -> list[CreatorMatch]:
    return [
        CreatorMatch.candidate("JaneDo", JANE, 6 / 7),
        CreatorMatch.new_creator("BobBuilder"),
    ]


class TestFindDuplicates:
    """Files already stored in the registry"""

    def test_reports_known_file_names(self, items):
        known = [KnownItem(creator_name="JaneDoe", collection_name="Kitchen", file_name="table.package")]

        duplicates = find_duplicates(items, known)

        assert len(duplicates) == 1
        assert duplicates[0].found_creator_name == "JaneDo"
        assert duplicates[0].existing_collection_name == "Kitchen"

    def test_first_known_location_wins(self, items):
        known = [
            KnownItem(creator_name="A", collection_name="First", file_name="tub.package"),
            KnownItem(creator_name="B", collection_name="Second", file_name="tub.package"),
        ]

        duplicates = find_duplicates(items, known)

        assert duplicates[0].existing_creator_name == "A"

    def test_file_names_compared_exactly(self, items):
        known = [KnownItem(creator_name="A", collection_name="B", file_name="TABLE.package")]

        assert find_duplicates(items, known) == []

    def test_no_known_items(self, items):
        assert find_duplicates(items, []) == []


class TestProposeDecisions:
    """Default proposal presented for review"""

    def test_confident_match_preselects_existing(self, items, matches):
        mapping = propose_decisions(items, matches)

        jane = mapping["JaneDo"]
        assert jane.action is DecisionAction.EXISTING
        assert jane.target_id == "1"
        assert jane.target_name == "JaneDoe"

    def test_catch_all_collection_renamed_when_merging(self, items, matches):
        mapping = propose_decisions(items, matches)

        jane = mapping["JaneDo"]
        assert jane.collection_target("General") == "JaneDo"
        assert jane.collection_target("Kitchen Set") == "Kitchen Set"

    def test_new_creator_keeps_found_names(self, items, matches):
        mapping = propose_decisions(items, matches)

        bob = mapping["BobBuilder"]
        assert bob.action is DecisionAction.NEW
        assert bob.target_name == "BobBuilder"
        assert bob.target_id is None
        assert bob.collection_target("General") == "General"

    def test_weak_match_starts_as_new(self, items, matches):
        mapping = propose_decisions(items, matches, suggest_threshold=0.9)

        assert mapping["JaneDo"].action is DecisionAction.NEW
        assert mapping["JaneDo"].target_name == "JaneDo"

    def test_catch_all_comparison_ignores_case(self, matches):
        mapping = propose_decisions(
            [item("JaneDo", "unsorted", "a.package")], matches, catch_all_collections=["Unsorted"]
        )

        assert mapping["JaneDo"].collection_target("unsorted") == "JaneDo"

    def test_unknown_has_no_decision(self, items, matches):
        assert "Unknown" not in propose_decisions(items, matches)

    def test_blank_names_skipped(self, items):
        mapping = propose_decisions(items, [CreatorMatch.new_creator("  ")])

        assert mapping == {}

    def test_collections_grouped_in_encounter_order(self, items):
        grouped = collections_by_creator(items)

        assert grouped["JaneDo"] == ["Kitchen Set", "General"]
        assert grouped["BobBuilder"] == ["Bathroom", "General"]


class TestBuildImportPlan:
    """Import planning on natural keys"""

    def test_default_plan(self, items, matches):
        plan = build_import_plan(items, propose_decisions(items, matches))

        assert plan.summary() == {
            "creators": 2,
            "new_creators": 1,
            "collections": 4,
            "items": 4,
            "unassigned_items": 1,
            "duplicates_skipped": 0,
        }
        assert plan.unassigned_items[0].file_name == "loose.package"

    def test_existing_creator_keyed_by_id(self, items, matches):
        plan = build_import_plan(items, propose_decisions(items, matches))

        keys = {creator.key for creator in plan.creators}
        assert keys == {("existing", "1"), ("new", "BobBuilder")}

    def test_merged_found_names(self):
        merged_items = [item("JaneDo", "A", "a.package"), item("J. Doe", "B", "b.package")]
        mapping = {
            name: CreatorDecision(
                found_name=name, action=DecisionAction.EXISTING, target_name="JaneDoe", target_id="1"
            )
            for name in ("JaneDo", "J. Doe")
        }

        plan = build_import_plan(merged_items, mapping)

        assert len(plan.creators) == 1
        assert plan.creators[0].found_names == ("JaneDo", "J. Doe")

    def test_repeated_items_counted_once(self, matches):
        repeated = [item("BobBuilder", "Bathroom", "tub.package")] * 3

        plan = build_import_plan(repeated, propose_decisions(repeated, matches))

        assert len(plan.items) == 1
        assert plan.duplicate_count == 2

    def test_same_file_in_two_collections_is_two_items(self, matches):
        spread = [
            item("BobBuilder", "Bathroom", "tub.package"),
            item("BobBuilder", "Spa", "tub.package"),
        ]

        plan = build_import_plan(spread, propose_decisions(spread, matches))

        assert len(plan.items) == 2

    def test_collections_merge_onto_target(self, matches):
        merged = [item("JaneDo", "General", "a.package"), item("JaneDo", "JaneDo", "b.package")]

        plan = build_import_plan(merged, propose_decisions(merged, matches))

        assert [c.name for c in plan.collections] == ["JaneDo"]
        assert len(plan.items) == 2

    def test_planning_twice_is_stable(self, items, matches):
        mapping = propose_decisions(items, matches)

        assert build_import_plan(items, mapping) == build_import_plan(items, mapping)
