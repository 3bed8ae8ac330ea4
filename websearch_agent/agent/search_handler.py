"""
Search handler: utterance in, utterance out.

Extracts the query from the utterance tokens, waits on the shared rate limiter,
queries DuckDuckGo and formats the answer. Every failure becomes an apology
utterance; nothing raises past handle_query.
"""

import logging

import httpx

from websearch_agent.core.errors import SearchError
from websearch_agent.schemas.envelope import Envelope, Event, create_text_utterance, utterance_text
from websearch_agent.services.formatter import format_search_results
from websearch_agent.services.rate_limiter import RateLimiter
from websearch_agent.services.search_client import DuckDuckGoClient

logger = logging.getLogger(__name__)

MISSING_QUERY_TEXT = "🌐 I need a search query to find current information on the web!"
SEARCH_FAILED_TEXT = (
    "🌐 I encountered an error while searching the web. "
    "Please try again with a different search query."
)


class SearchHandler:
    def __init__(self, speaker_uri: str, client: DuckDuckGoClient, rate_limiter: RateLimiter) -> None:
        self.speaker_uri = speaker_uri
        self.client = client
        self.rate_limiter = rate_limiter

    async def handle_query(self, event: Event, in_envelope: Envelope) -> Event:
        """Answer one utterance. Always returns an utterance addressed to the inbound sender."""
        reply_to = in_envelope.sender.speaker_uri
        dialog_event = event.dialog_event
        # Only a missing or empty token list prompts; empty-string tokens still search
        if dialog_event is None or not dialog_event.tokens:
            logger.info("[search_handler:handle_query] OUT no tokens from=%s, prompting for a query", reply_to)
            return self._reply(MISSING_QUERY_TEXT, reply_to)

        query = utterance_text(event)
        logger.info("[search_handler:handle_query] IN  query=%r from=%s", query, reply_to)

        try:
            text = await self.search(query)
        except (SearchError, httpx.HTTPError) as e:
            logger.warning("[search_handler:handle_query] search failed for %r: %s", query, e)
            return self._reply(SEARCH_FAILED_TEXT, reply_to)
        except Exception:
            logger.exception("Error in web search")
            return self._reply(SEARCH_FAILED_TEXT, reply_to)

        logger.info("[search_handler:handle_query] OUT answer_len=%d", len(text))
        return self._reply(text, reply_to)

    async def search(self, query: str) -> str:
        """Rate-limit, call the provider, format. Raises SearchError on failure."""
        await self.rate_limiter.wait()
        answer = await self.client.instant_answer(query)
        return format_search_results(query, answer)

    def _reply(self, text: str, to_speaker_uri: str) -> Event:
        return create_text_utterance(self.speaker_uri, text, to_speaker_uri)
