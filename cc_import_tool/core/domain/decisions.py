# cc_import_tool/core/domain/decisions.py

"""Reviewer decisions: how discovered creators and collections map onto the registry"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

# Local imports
from cc_import_tool.core.domain.enums import DecisionAction
from cc_import_tool.core.domain.exceptions import DecisionError


class CollectionDecision(BaseModel):
    """Target for one discovered collection under a creator"""

    model_config = ConfigDict(frozen=True)

    original_name: str
    action: DecisionAction = DecisionAction.NEW
    target_name: str

    @model_validator(mode="after")
    def check_target(self) -> "CollectionDecision":
        if not self.target_name.strip():
            raise DecisionError(f"Collection {self.original_name!r} needs a target name")
        return self


class CreatorDecision(BaseModel):
    """Confirmed action for one discovered creator name

    NEW creates a creator called ``target_name``; EXISTING attaches the
    creator's items to the registry entry ``target_id``.
    """

    model_config = ConfigDict(frozen=True)

    found_name: str
    action: DecisionAction
    target_name: str
    target_id: str | None = None
    collections: dict[str, CollectionDecision] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_target(self) -> "CreatorDecision":
        if not self.target_name.strip():
            raise DecisionError(f"Creator {self.found_name!r} needs a target name")
        if self.action is DecisionAction.EXISTING and not self.target_id:
            raise DecisionError(f"Creator {self.found_name!r} is mapped to an existing entry without an id")
        if self.action is DecisionAction.NEW and self.target_id is not None:
            raise DecisionError(f"Creator {self.found_name!r} is new but carries id {self.target_id!r}")
        return self

    def collection_target(self, collection_name: str) -> str:
        """Target collection name for a discovered collection (unchanged if undecided)"""
        decision = self.collections.get(collection_name)
        return decision.target_name if decision else collection_name


# found_name -> decision
type ConfirmedMapping = dict[str, CreatorDecision]
