"""FastAPI dependencies: the process-wide agent instance."""

from functools import lru_cache

from websearch_agent.agent.web_search_agent import WebSearchAgent, create_web_search_agent
from websearch_agent.core.config import AGENT_NAME, AGENT_ORGANIZATION, SERVICE_URL, SPEAKER_URI


@lru_cache(maxsize=1)
def get_agent() -> WebSearchAgent:
    """One agent per process so every request shares its rate limiter."""
    return create_web_search_agent(
        speaker_uri=SPEAKER_URI,
        service_url=SERVICE_URL,
        name=AGENT_NAME,
        organization=AGENT_ORGANIZATION,
    )
