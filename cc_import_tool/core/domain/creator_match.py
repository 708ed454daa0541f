# cc_import_tool/core/domain/creator_match.py

"""Registry entries and the reconciliation verdicts produced against them"""

# Standard library imports
from math import nextafter

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from cc_import_tool.core.domain.enums import MatchVerdict

# Highest similarity a non-exact candidate can carry; 1.0 is reserved for exact matches
MAX_CANDIDATE_SIMILARITY = nextafter(1.0, 0.0)


class RegistryEntry(BaseModel):
    """A known creator as seen by the persistence layer (read-only snapshot)"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class CreatorMatch(BaseModel):
    """Reconciliation verdict for one distinct discovered creator name"""

    model_config = ConfigDict(frozen=True)

    found_name: str
    existing_name: str | None = Field(default=None, description="Matched registry name")
    existing_id: str | None = Field(default=None, description="Matched registry id")
    similarity: float = Field(ge=0.0, le=1.0, description="1 for exact, 0 for no candidate")
    needs_confirmation: bool

    @property
    def verdict(self) -> MatchVerdict:
        """Classify this match as exact, fuzzy candidate, or new creator"""
        if self.existing_id is None:
            return MatchVerdict.NEW
        if not self.needs_confirmation:
            return MatchVerdict.EXACT
        return MatchVerdict.FUZZY

    @classmethod
    def exact(cls, found_name: str, entry: RegistryEntry) -> "CreatorMatch":
        return cls(
            found_name=found_name,
            existing_name=entry.name,
            existing_id=entry.id,
            similarity=1.0,
            needs_confirmation=False,
        )

    @classmethod
    def candidate(cls, found_name: str, entry: RegistryEntry, score: float) -> "CreatorMatch":
        """Fuzzy candidate; rounded metrics that score a non-exact pair at 1.0 are capped"""
        return cls(
            found_name=found_name,
            existing_name=entry.name,
            existing_id=entry.id,
            similarity=min(score, MAX_CANDIDATE_SIMILARITY),
            needs_confirmation=True,
        )

    @classmethod
    def new_creator(cls, found_name: str) -> "CreatorMatch":
        return cls(found_name=found_name, similarity=0.0, needs_confirmation=True)
