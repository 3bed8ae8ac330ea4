"""
API handlers: validate the raw Open Floor body, call the agent, map results/errors to HTTP.

Responsibility: Bridge HTTP types and the agent. Payload validation and
serialization live here so the agent only ever sees parsed envelopes.
"""

import logging
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import ValidationError

from websearch_agent.agent.web_search_agent import WebSearchAgent
from websearch_agent.schemas.envelope import OpenFloorPayload

logger = logging.getLogger(__name__)


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Turn pydantic validation errors into readable `location: message` strings."""
    details = []
    for err_entry in exc.errors():
        loc = ".".join(str(x) for x in err_entry.get("loc", ()))
        msg = err_entry.get("msg", "Validation error")
        details.append(f"{loc}: {msg}" if loc else msg)
    return details


def invalid_payload(details: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid OpenFloor payload", "details": details},
    )


async def handle_openfloor_payload(body: Any, agent: WebSearchAgent) -> JSONResponse:
    """Validate `body` as {"openFloor": envelope}, run the agent, return the reply payload (400 if invalid)."""
    try:
        payload = OpenFloorPayload.model_validate(body)
    except ValidationError as e:
        details = format_validation_errors(e)
        logger.error("Validation errors: %s", details)
        return invalid_payload(details)

    in_envelope = payload.open_floor
    logger.info("Processing web search from: %s", in_envelope.sender.speaker_uri)
    out_envelope = await agent.process_envelope(in_envelope)
    response = OpenFloorPayload(open_floor=out_envelope).to_wire()
    logger.debug("Sending web search results: %s", response)
    return JSONResponse(status_code=200, content=response)
