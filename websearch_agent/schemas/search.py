"""Schemas for the DuckDuckGo Instant Answer response (only the fields we format)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ProviderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RelatedTopic(_ProviderModel):
    """One related topic. Topic groups ({Name, Topics}) have no Text and are skipped when formatting."""

    text: str = Field("", alias="Text")
    first_url: str = Field("", alias="FirstURL")

    @field_validator("text", "first_url", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class InfoboxEntry(_ProviderModel):
    label: Any = None
    value: Any = None


class Infobox(_ProviderModel):
    content: list[InfoboxEntry] = Field(default_factory=list)

    @field_validator("content", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v


class InstantAnswer(_ProviderModel):
    """Parsed instant answer. Every field is optional; empty strings mean absent."""

    abstract: str = Field("", alias="Abstract")
    abstract_source: str = Field("", alias="AbstractSource")
    abstract_url: str = Field("", alias="AbstractURL")
    definition: str = Field("", alias="Definition")
    definition_source: str = Field("", alias="DefinitionSource")
    definition_url: str = Field("", alias="DefinitionURL")
    related_topics: list[RelatedTopic] = Field(default_factory=list, alias="RelatedTopics")
    infobox: Infobox | None = Field(None, alias="Infobox")

    @field_validator(
        "abstract",
        "abstract_source",
        "abstract_url",
        "definition",
        "definition_source",
        "definition_url",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("related_topics", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("infobox", mode="before")
    @classmethod
    def _blank_infobox(cls, v: Any) -> Any:
        # The API sends "" instead of an object when there is no infobox
        if not v:
            return None
        return v

    @property
    def infobox_entries(self) -> list[InfoboxEntry]:
        return list(self.infobox.content) if self.infobox else []

    def is_empty(self) -> bool:
        return not (self.abstract or self.definition or self.related_topics or self.infobox_entries)
