"""
Format an instant answer into the markdown-ish text block sent back as an utterance.

Sections, in order, each only when present: header, summary, definition,
related information (first 3 topics), key information (first 5 infobox entries).
"""

from websearch_agent.core.errors import NoResultsError
from websearch_agent.schemas.search import InstantAnswer

MAX_RELATED_TOPICS = 3
MAX_INFOBOX_ENTRIES = 5


def format_search_results(query: str, answer: InstantAnswer) -> str:
    """Return the answer text for `query`. Raises NoResultsError when the answer has no content."""
    if answer.is_empty():
        raise NoResultsError(query)

    parts = [f"**Web Search Results for: {query}**\n\n"]

    if answer.abstract:
        parts.append(f"**Summary:**\n{answer.abstract}\n\n")
        if answer.abstract_source:
            parts.append(f"Source: {answer.abstract_source}\n")
        if answer.abstract_url:
            parts.append(f"More info: {answer.abstract_url}\n\n")

    if answer.definition:
        parts.append(f"**Definition:**\n{answer.definition}\n")
        if answer.definition_source:
            parts.append(f"Source: {answer.definition_source}\n")
        if answer.definition_url:
            parts.append(f"More info: {answer.definition_url}\n\n")

    if answer.related_topics:
        parts.append("**Related Information:**\n")
        # Numbering follows the topic's position, so skipped entries leave a gap
        for index, topic in enumerate(answer.related_topics[:MAX_RELATED_TOPICS], 1):
            if not topic.text:
                continue
            parts.append(f"{index}. {topic.text}\n")
            if topic.first_url:
                parts.append(f"   Link: {topic.first_url}\n")
        parts.append("\n")

    entries = answer.infobox_entries
    if entries:
        parts.append("**Key Information:**\n")
        for entry in entries[:MAX_INFOBOX_ENTRIES]:
            if entry.label and entry.value:
                parts.append(f"• {entry.label}: {entry.value}\n")
        parts.append("\n")

    return "".join(parts)
