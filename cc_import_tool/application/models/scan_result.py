# cc_import_tool/application/models/scan_result.py

"""Results of scanning an archive and of analysing it against the registry"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.discovered_item import DuplicateItem
from cc_import_tool.core.domain.enums import MatchVerdict
from cc_import_tool.core.domain.provenance import UNKNOWN_CREATOR
from cc_import_tool.core.types.json import JSONDict


class ScanResult(BaseModel):
    """Items discovered in one archive pass and the distinct creator names among them"""

    model_config = ConfigDict(frozen=True)

    items: list[DiscoveredItem] = Field(default_factory=list)
    distinct_creator_names: frozenset[str] = Field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.items


class ScanStatistics(BaseModel):
    """Counts reported at the end of an analysis"""

    total_items: int = 0
    distinct_creators: int = 0
    exact_matches: int = 0
    fuzzy_matches: int = 0
    new_creators: int = 0
    unknown_creator_items: int = 0
    duplicate_items: int = 0

    @classmethod
    def from_results(
        cls,
        items: list[DiscoveredItem],
        matches: list[CreatorMatch],
        duplicates: list[DuplicateItem],
    ) -> "ScanStatistics":
        verdicts = [match.verdict for match in matches]
        return cls(
            total_items=len(items),
            distinct_creators=len(matches),
            exact_matches=verdicts.count(MatchVerdict.EXACT),
            fuzzy_matches=verdicts.count(MatchVerdict.FUZZY),
            new_creators=verdicts.count(MatchVerdict.NEW),
            unknown_creator_items=sum(1 for i in items if i.creator_name == UNKNOWN_CREATOR),
            duplicate_items=len(duplicates),
        )

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()


class ScanAnalysis(BaseModel):
    """Proposal handed to the reviewer: items, verdicts, and duplicates for one archive"""

    archive_path: str
    items: list[DiscoveredItem] = Field(default_factory=list)
    matches: list[CreatorMatch] = Field(default_factory=list)
    duplicates: list[DuplicateItem] = Field(default_factory=list)
    statistics: ScanStatistics = Field(default_factory=ScanStatistics)

    def matches_needing_confirmation(self) -> list[CreatorMatch]:
        """Verdicts a human has to decide on"""
        return [match for match in self.matches if match.needs_confirmation]

    def items_by_creator(self) -> dict[str, dict[str, list[DiscoveredItem]]]:
        """Group items creator -> collection -> items, keeping encounter order"""
        grouped: dict[str, dict[str, list[DiscoveredItem]]] = {}
        for item in self.items:
            grouped.setdefault(item.creator_name, {}).setdefault(item.collection_name, []).append(
                item
            )
        return grouped

    def to_dict(self) -> JSONDict:
        return self.model_dump(mode="json")
