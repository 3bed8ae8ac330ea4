"""
DuckDuckGo Instant Answer client: one GET per query, parsed into InstantAnswer.

No API key. No retries: a failed request raises SearchProviderError immediately.
"""

import logging

import httpx
from pydantic import ValidationError

from websearch_agent.core.config import DUCKDUCKGO_API_URL, SEARCH_USER_AGENT
from websearch_agent.core.errors import SearchProviderError
from websearch_agent.schemas.search import InstantAnswer

logger = logging.getLogger(__name__)


class DuckDuckGoClient:
    """Async client for https://api.duckduckgo.com/ (format=json, HTML stripped, no disambiguation)."""

    def __init__(
        self,
        base_url: str = DUCKDUCKGO_API_URL,
        user_agent: str = SEARCH_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.user_agent = user_agent
        self._transport = transport

    async def instant_answer(self, query: str) -> InstantAnswer:
        params = {"q": query, "format": "json", "no_html": "1", "skip_disambig": "1"}
        logger.info("[search_client:instant_answer] IN  query=%r", query)
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                headers={"User-Agent": self.user_agent},
            ) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            logger.warning("[search_client:instant_answer] request failed: %s", e)
            raise SearchProviderError(f"DuckDuckGo request failed: {e}") from e

        if not response.is_success:
            logger.warning("[search_client:instant_answer] DuckDuckGo error %s: %s", response.status_code, response.text[:200])
            raise SearchProviderError(f"DuckDuckGo API error: {response.status_code}", status_code=response.status_code)

        try:
            answer = InstantAnswer.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("[search_client:instant_answer] unreadable response: %s", e)
            raise SearchProviderError(f"DuckDuckGo returned an unreadable response: {e}") from e
        logger.info(
            "[search_client:instant_answer] OUT abstract=%s definition=%s related_topics=%d infobox_entries=%d",
            bool(answer.abstract),
            bool(answer.definition),
            len(answer.related_topics),
            len(answer.infobox_entries),
        )
        return answer
