"""
FastAPI application entry point.

Assembles the FastAPI app with the board, advisor and search routers.
"""

import logging
import os
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itinerary_advisor.advisor.advisor_api import router as advisor_router
from itinerary_advisor.itinerary.board_api import router as board_router
from itinerary_advisor.search.search_api import router as search_router
from itinerary_advisor.shared.logging.config import setup_logging


# ============================================================================
# Logging configuration (single source of truth for the whole app)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
)

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,
)

# Quiet noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)

# Session transitions as JSON lines, e.g. for log shipping
if os.getenv("ADVISOR_JSON_SESSION_LOGS"):
    setup_logging(log_file=os.getenv("ADVISOR_SESSION_LOG_FILE"))


app = FastAPI(
    title="Itinerary Advisor",
    description="Trip board with LLM-suggested alternative itineraries built with LangGraph",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

SERVICES = {
    "board": board_router,
    "advisor": advisor_router,
    "search": search_router,
}

for service_router in SERVICES.values():
    app.include_router(service_router)


@app.get("/")
async def root():
    """List the mounted services and where they live."""
    return {
        "name": app.title,
        "version": app.version,
        "services": {
            name: {"status": "active", "endpoints": service_router.prefix}
            for name, service_router in SERVICES.items()
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
