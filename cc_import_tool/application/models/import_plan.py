# cc_import_tool/application/models/import_plan.py

"""Write set produced from a confirmed mapping, keyed for idempotent inserts"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.enums import DecisionAction

# ("existing", registry id) or ("new", target name)
type CreatorKey = tuple[str, str]


class PlannedCreator(BaseModel):
    """A creator the import touches: an existing registry entry or one to create"""

    model_config = ConfigDict(frozen=True)

    action: DecisionAction
    name: str
    existing_id: str | None = None
    found_names: tuple[str, ...] = ()

    @property
    def key(self) -> CreatorKey:
        if self.action is DecisionAction.EXISTING and self.existing_id is not None:
            return ("existing", self.existing_id)
        return ("new", self.name)


class PlannedCollection(BaseModel):
    """Collection natural key: (owning creator, collection name)"""

    model_config = ConfigDict(frozen=True)

    creator_key: CreatorKey
    name: str

    @property
    def key(self) -> tuple[CreatorKey, str]:
        return (self.creator_key, self.name)


class PlannedItem(BaseModel):
    """Item natural key: (collection, file name)"""

    model_config = ConfigDict(frozen=True)

    creator_key: CreatorKey
    collection_name: str
    file_name: str

    @property
    def key(self) -> tuple[CreatorKey, str, str]:
        return (self.creator_key, self.collection_name, self.file_name)


class ImportPlan(BaseModel):
    """Everything the persistence collaborator needs to apply a confirmed import"""

    creators: list[PlannedCreator] = Field(default_factory=list)
    collections: list[PlannedCollection] = Field(default_factory=list)
    items: list[PlannedItem] = Field(default_factory=list)
    unassigned_items: list[DiscoveredItem] = Field(default_factory=list)
    duplicate_count: int = 0

    @property
    def new_creator_count(self) -> int:
        return sum(1 for c in self.creators if c.action is DecisionAction.NEW)

    def summary(self) -> dict[str, int]:
        return {
            "creators": len(self.creators),
            "new_creators": self.new_creator_count,
            "collections": len(self.collections),
            "items": len(self.items),
            "unassigned_items": len(self.unassigned_items),
            "duplicates_skipped": self.duplicate_count,
        }
