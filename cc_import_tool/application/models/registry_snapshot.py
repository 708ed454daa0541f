# cc_import_tool/application/models/registry_snapshot.py

"""Point-in-time copy of the registry used for one reconciliation run"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.core.domain.discovered_item import KnownItem


class RegistrySnapshot(BaseModel):
    """Known creators (and optionally their files), read-only to the pipeline

    Satisfies the RegistryProvider protocol so a loaded snapshot can stand
    in for a live store.
    """

    model_config = ConfigDict(frozen=True)

    creators: list[RegistryEntry] = Field(default_factory=list)
    items: list[KnownItem] = Field(default_factory=list)

    def list_creators(self) -> list[RegistryEntry]:
        return list(self.creators)

    def list_known_items(self) -> list[KnownItem]:
        return list(self.items)
