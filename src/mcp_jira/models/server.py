"""
Server capability model served through the ``info://server`` resource.
"""

from pydantic import BaseModel, ConfigDict


class ServerCapabilities(BaseModel):
    """Identity, version and the ordered list of tool names of this server."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    actions: tuple[str, ...]

    def to_json(self) -> str:
        return self.model_dump_json()
