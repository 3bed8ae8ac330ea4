"""
Shared fixtures: envelope/event builders, a fake search client and a fast rate limiter.

No network: the provider is either a fake client or httpx.MockTransport.
"""

from typing import Any

import pytest

from websearch_agent.agent.web_search_agent import WebSearchAgent, create_web_search_agent
from websearch_agent.core.errors import SearchError
from websearch_agent.schemas.envelope import Envelope
from websearch_agent.schemas.search import InstantAnswer
from websearch_agent.services.rate_limiter import RateLimiter

AGENT_SPEAKER_URI = "tag:openfloor-research.com,2025:web-search-agent"
AGENT_SERVICE_URL = "https://search.example.com/openfloor"
USER_SPEAKER_URI = "tag:example.com,2025:user-1"
USER_SERVICE_URL = "https://client.example.com"


class FakeClock:
    """Manual clock; sleep() records the delay and advances time."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeSearchClient:
    """Stands in for DuckDuckGoClient; records queries, returns a fixed answer or raises."""

    def __init__(self, data: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.data = data or {}
        self.error = error
        self.queries: list[str] = []

    async def instant_answer(self, query: str) -> InstantAnswer:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return InstantAnswer.model_validate(self.data)


def build_envelope(events: list[dict[str, Any]], sender: str = USER_SPEAKER_URI) -> Envelope:
    return Envelope.model_validate(
        {
            "schema": {"version": "1.0.0"},
            "conversation": {"id": "conv-42"},
            "sender": {"speakerUri": sender, "serviceUrl": USER_SERVICE_URL},
            "events": events,
        }
    )


def build_utterance(tokens: list[str], to: dict[str, str] | None = None) -> dict[str, Any]:
    event: dict[str, Any] = {
        "eventType": "utterance",
        "parameters": {
            "dialogEvent": {
                "speakerUri": USER_SPEAKER_URI,
                "features": {
                    "text": {"mimeType": "text/plain", "tokens": [{"value": t} for t in tokens]},
                },
            }
        },
    }
    if to is not None:
        event["to"] = to
    return event


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_agent(clock: FakeClock):
    """Factory: agent with the given search client and a rate limiter on the fake clock."""

    def _make(client: Any = None) -> WebSearchAgent:
        return create_web_search_agent(
            speaker_uri=AGENT_SPEAKER_URI,
            service_url=AGENT_SERVICE_URL,
            client=client or FakeSearchClient({"Abstract": "default"}),
            rate_limiter=RateLimiter(min_interval=2.0, clock=clock, sleep=clock.sleep),
        )

    return _make


@pytest.fixture
def failing_client() -> FakeSearchClient:
    return FakeSearchClient(error=SearchError("boom"))
