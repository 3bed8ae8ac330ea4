"""Schemas for the agent manifest (publishManifests / servicingManifests)."""

from typing import Any

from pydantic import Field

from websearch_agent.schemas.envelope import OpenFloorModel


class Identification(OpenFloorModel):
    speaker_uri: str
    service_url: str
    organization: str | None = None
    conversational_name: str | None = None
    synopsis: str | None = None


class Capability(OpenFloorModel):
    keyphrases: list[str] = Field(default_factory=list)
    descriptions: list[str] = Field(default_factory=list)


class Manifest(OpenFloorModel):
    """Self-description of an agent: who it is and what it can do."""

    identification: Identification
    capabilities: list[Capability] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
