"""
Web search agent: routes the events of an inbound Open Floor envelope.

Utterances addressed to the agent go to the SearchHandler; getManifests gets a
publishManifests reply; everything else is skipped. Identity, manifest and rate
limiter are fixed at construction and shared read-only across requests (the rate
limiter's timestamp is the only state that changes, inside RateLimiter.wait).
"""

import logging

from websearch_agent.agent.manifest import DEFAULT_AGENT_NAME, DEFAULT_ORGANIZATION, build_manifest
from websearch_agent.agent.search_handler import SearchHandler
from websearch_agent.schemas.envelope import (
    Conversation,
    Envelope,
    Event,
    EventKind,
    SchemaVersion,
    Sender,
    To,
)
from websearch_agent.schemas.manifest import Manifest
from websearch_agent.services.rate_limiter import RateLimiter
from websearch_agent.services.search_client import DuckDuckGoClient

logger = logging.getLogger(__name__)

# Any serviceUrl containing this is treated as addressed to us (local multi-agent setups)
LOOPBACK_MARKER = "localhost"


class WebSearchAgent:
    def __init__(
        self,
        manifest: Manifest,
        client: DuckDuckGoClient | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.manifest = manifest
        self.speaker_uri = manifest.identification.speaker_uri
        self.service_url = manifest.identification.service_url
        self.rate_limiter = rate_limiter or RateLimiter()
        self.search_handler = SearchHandler(
            speaker_uri=self.speaker_uri,
            client=client or DuckDuckGoClient(),
            rate_limiter=self.rate_limiter,
        )

    def is_addressed_to_me(self, event: Event) -> bool:
        to = event.to
        if to is None:
            return True
        if to.speaker_uri == self.speaker_uri or to.service_url == self.service_url:
            return True
        # Deliberately loose: keeps local test floors working without exact URLs
        return bool(to.service_url) and LOOPBACK_MARKER in to.service_url

    async def process_envelope(self, in_envelope: Envelope) -> Envelope:
        """Handle every event in order and return the reply envelope (possibly with no events)."""
        logger.info(
            "[agent:process_envelope] IN  conversation=%s sender=%s events=%d",
            in_envelope.conversation.id,
            in_envelope.sender.speaker_uri,
            len(in_envelope.events),
        )
        response_events: list[Event] = []
        for event in in_envelope.events:
            if not self.is_addressed_to_me(event):
                logger.debug("[agent:process_envelope] skip eventType=%s: addressed elsewhere", event.event_type)
                continue
            kind = event.kind
            if kind is EventKind.UTTERANCE:
                response_events.append(await self.search_handler.handle_query(event, in_envelope))
            elif kind is EventKind.GET_MANIFESTS:
                response_events.append(self._publish_manifests(in_envelope))
            else:
                # publishManifests from others and unknown event types need no reply
                logger.debug("[agent:process_envelope] skip eventType=%s: not handled", event.event_type)

        out_envelope = Envelope(
            schema_=SchemaVersion(version=in_envelope.schema_.version),
            conversation=Conversation(id=in_envelope.conversation.id),
            sender=Sender(speaker_uri=self.speaker_uri, service_url=self.service_url),
            events=response_events,
        )
        logger.info("[agent:process_envelope] OUT events=%s", [e.event_type for e in response_events])
        return out_envelope

    def _publish_manifests(self, in_envelope: Envelope) -> Event:
        return Event(
            event_type=EventKind.PUBLISH_MANIFESTS.value,
            to=To(speaker_uri=in_envelope.sender.speaker_uri),
            parameters={"servicingManifests": [self.manifest.to_wire()]},
        )


def create_web_search_agent(
    speaker_uri: str,
    service_url: str,
    name: str = DEFAULT_AGENT_NAME,
    organization: str = DEFAULT_ORGANIZATION,
    client: DuckDuckGoClient | None = None,
    rate_limiter: RateLimiter | None = None,
) -> WebSearchAgent:
    """Build the manifest for this identity and an agent that serves it."""
    manifest = build_manifest(
        speaker_uri=speaker_uri,
        service_url=service_url,
        organization=organization,
        conversational_name=name,
    )
    return WebSearchAgent(manifest, client=client, rate_limiter=rate_limiter)
