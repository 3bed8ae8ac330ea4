# Run from project root: uvicorn websearch_agent.main:app --port 8080
# or: python -m websearch_agent.main

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from websearch_agent.api.routes import router
from websearch_agent.core.config import ALLOWED_ORIGIN, HOST, PORT

logging.basicConfig(level=logging.INFO)


app = FastAPI(title="Open Floor Web Search Agent")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[ALLOWED_ORIGIN],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.include_router(router)


if __name__ == "__main__":
    logging.getLogger(__name__).info("Web Search Agent server running on port %d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
