# cc_import_tool/core/domain/discovered_item.py

"""Content file models: items found in an archive and items already known"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class DiscoveredItem(BaseModel):
    """One content file found inside an archive, tagged with its provenance

    Items are created once per accepted archive entry and never mutated.
    Several items may share the same creator/collection pair.
    """

    model_config = ConfigDict(frozen=True)

    creator_name: str = Field(description="Creator derived from the entry path")
    collection_name: str = Field(description="Collection derived from the entry path")
    file_name: str = Field(description="Last path segment of the entry")

    @property
    def provenance(self) -> tuple[str, str]:
        """(creator_name, collection_name) pair"""
        return (self.creator_name, self.collection_name)


class KnownItem(BaseModel):
    """A content file the registry already stores"""

    model_config = ConfigDict(frozen=True)

    creator_name: str
    collection_name: str
    file_name: str


class DuplicateItem(BaseModel):
    """A discovered file whose name is already present in the registry"""

    model_config = ConfigDict(frozen=True)

    file_name: str
    found_creator_name: str
    found_collection_name: str
    existing_creator_name: str
    existing_collection_name: str
