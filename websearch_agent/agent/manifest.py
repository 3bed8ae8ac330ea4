"""
Manifest builder: the agent's identity plus its fixed web-search capability.

Pure function; used once at agent construction and served on getManifests.
"""

from websearch_agent.schemas.manifest import Capability, Identification, Manifest

DEFAULT_AGENT_NAME = "Web Search Agent"
DEFAULT_ORGANIZATION = "OpenFloor Research"

SYNOPSIS = "Web search specialist for current information, news, guides, and general web content"

KEYPHRASES = (
    "web search",
    "news",
    "current",
    "latest",
    "how to",
    "guide",
    "tutorial",
    "what is",
    "information",
    "recent",
)

DESCRIPTIONS = (
    "Search the web for current information and news",
    "Find guides, tutorials, and how-to information",
    "Provide general web search results and overviews",
)


def build_manifest(
    speaker_uri: str,
    service_url: str,
    organization: str = DEFAULT_ORGANIZATION,
    conversational_name: str = DEFAULT_AGENT_NAME,
) -> Manifest:
    return Manifest(
        identification=Identification(
            speaker_uri=speaker_uri,
            service_url=service_url,
            organization=organization,
            conversational_name=conversational_name,
            synopsis=SYNOPSIS,
        ),
        capabilities=[Capability(keyphrases=list(KEYPHRASES), descriptions=list(DESCRIPTIONS))],
    )
