"""
API routes: register endpoints; no logic, only delegate to handlers.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from websearch_agent.agent.web_search_agent import WebSearchAgent
from websearch_agent.api.deps import get_agent
from websearch_agent.api.handlers import handle_openfloor_payload, invalid_payload

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/health", tags=["system"])
def health() -> dict:
    return {
        "status": "healthy",
        "agent": "web-search-agent",
        "capabilities": ["web search", "current information", "news and guides"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# --- Open Floor ---

@router.post(
    "/",
    tags=["openfloor"],
    summary="Open Floor endpoint",
    description="Accepts {openFloor: envelope}; returns the agent's reply envelope. 400 on invalid payload, 500 on unexpected failure.",
)
async def post_openfloor(request: Request, agent: WebSearchAgent = Depends(get_agent)) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError (body not UTF-8) both land here
        logger.error("Validation errors: malformed JSON body: %s", e)
        return invalid_payload([f"Malformed JSON body: {e}"])
    try:
        return await handle_openfloor_payload(body, agent)
    except Exception as e:
        logger.exception("Error processing web search request")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(e)},
        )
