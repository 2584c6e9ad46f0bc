"""FastAPI app entry point for the Combat View service."""

import logging

from fastapi import FastAPI

from api.combat import router as combat_router
from api.debug import router as debug_router
from config import DEBUG_ENDPOINTS, LOG_LEVEL, SERVICE_NAME, SERVICE_VERSION

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVICE_NAME,
    description="Read-only combat panel model: action legality and check diagnostics",
    version=SERVICE_VERSION,
)

app.include_router(combat_router, prefix="/combat", tags=["Combat"])
if DEBUG_ENDPOINTS:
    app.include_router(debug_router, prefix="/debug", tags=["Debug"])

logger.info("%s %s ready (debug endpoints %s)", SERVICE_NAME, SERVICE_VERSION,
            "on" if DEBUG_ENDPOINTS else "off")


@app.get("/")
def root() -> dict:
    """Root endpoint returning service info."""
    return {"name": SERVICE_NAME, "version": SERVICE_VERSION, "status": "running"}


@app.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"healthy": True}
