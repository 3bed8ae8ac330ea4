"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Agent identity is read once here and handed to the agent at startup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Agent identity (Open Floor addressing)
SPEAKER_URI: str = (
    os.getenv("SPEAKER_URI", "tag:openfloor-research.com,2025:web-search-agent").strip()
    or "tag:openfloor-research.com,2025:web-search-agent"
)
SERVICE_URL: str = os.getenv("SERVICE_URL", "http://localhost:8080").strip() or "http://localhost:8080"
AGENT_NAME: str = os.getenv("AGENT_NAME", "Web Search Specialist").strip() or "Web Search Specialist"
AGENT_ORGANIZATION: str = (
    os.getenv("AGENT_ORGANIZATION", "OpenFloor Demo Corp").strip() or "OpenFloor Demo Corp"
)

# Server
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(os.getenv("PORT", "8080"))

# CORS: only this origin may call the agent from a browser
ALLOWED_ORIGIN: str = os.getenv("ALLOWED_ORIGIN", "https://openfloor.dev").strip()

# DuckDuckGo Instant Answer API (no key required)
DUCKDUCKGO_API_URL: str = "https://api.duckduckgo.com/"
SEARCH_USER_AGENT: str = "OpenFloor Web Search Agent (search@openfloor.org)"

# Minimum spacing between provider calls (seconds), measured start to start
RATE_LIMIT_DELAY: float = float(os.getenv("RATE_LIMIT_DELAY", "2.0"))
