"""
Open Floor envelope models: payload, envelope, events, dialog events.

Wire format is camelCase JSON; Python attributes are snake_case. Always serialize
with `model_dump(by_alias=True, exclude_none=True)` for the wire.
"""

import uuid
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class OpenFloorModel(BaseModel):
    """Base for protocol records: camelCase aliases, immutable once built."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EventKind(str, Enum):
    """Event types this agent knows about. Anything else is UNRECOGNIZED."""

    UTTERANCE = "utterance"
    GET_MANIFESTS = "getManifests"
    PUBLISH_MANIFESTS = "publishManifests"
    UNRECOGNIZED = "unrecognized"


class SchemaVersion(OpenFloorModel):
    version: str
    url: str | None = None


class Conversation(OpenFloorModel):
    id: str


class Sender(OpenFloorModel):
    speaker_uri: str
    service_url: str | None = None


class To(OpenFloorModel):
    """Event addressing. Both fields optional; an event without `to` is for everyone."""

    speaker_uri: str | None = None
    service_url: str | None = None
    private: bool | None = None


class Token(OpenFloorModel):
    value: str = ""


class TextFeature(OpenFloorModel):
    mime_type: str = "text/plain"
    tokens: list[Token] = Field(default_factory=list)


class Features(OpenFloorModel):
    text: TextFeature | None = None


class DialogEvent(OpenFloorModel):
    """Dialog content of an utterance. Only the text feature is read by this agent."""

    speaker_uri: str | None = None
    id: str | None = None
    features: Features | None = None

    @property
    def tokens(self) -> list[Token]:
        if self.features is None or self.features.text is None:
            return []
        return list(self.features.text.tokens)


class Event(OpenFloorModel):
    event_type: str
    to: To | None = None
    reason: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_dialog_event(self) -> "Event":
        # Utterances must carry a well-formed dialogEvent when they carry one at all
        if self.event_type == EventKind.UTTERANCE.value and self.parameters.get("dialogEvent") is not None:
            DialogEvent.model_validate(self.parameters["dialogEvent"])
        return self

    @property
    def kind(self) -> EventKind:
        try:
            kind = EventKind(self.event_type)
        except ValueError:
            return EventKind.UNRECOGNIZED
        return kind

    @property
    def dialog_event(self) -> DialogEvent | None:
        """Parsed dialogEvent parameter, or None when absent."""
        raw = self.parameters.get("dialogEvent")
        if raw is None:
            return None
        return DialogEvent.model_validate(raw)


class Envelope(OpenFloorModel):
    schema_: SchemaVersion = Field(alias="schema")
    conversation: Conversation
    sender: Sender
    events: list[Event] = Field(default_factory=list)


class OpenFloorPayload(OpenFloorModel):
    """Top-level JSON body: {"openFloor": <envelope>}."""

    open_floor: Envelope

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def create_text_utterance(speaker_uri: str, text: str, to_speaker_uri: str | None = None) -> Event:
    """Build a plain-text utterance event authored by speaker_uri."""
    dialog_event = DialogEvent(
        speaker_uri=speaker_uri,
        id=str(uuid.uuid4()),
        features=Features(text=TextFeature(mime_type="text/plain", tokens=[Token(value=text)])),
    )
    return Event(
        event_type=EventKind.UTTERANCE.value,
        to=To(speaker_uri=to_speaker_uri) if to_speaker_uri else None,
        parameters={"dialogEvent": dialog_event.model_dump(mode="json", by_alias=True, exclude_none=True)},
    )


def utterance_text(event: Event) -> str:
    """Concatenate the text tokens of an utterance, in order, with no separator."""
    dialog_event = event.dialog_event
    if dialog_event is None:
        return ""
    return "".join(token.value for token in dialog_event.tokens)
