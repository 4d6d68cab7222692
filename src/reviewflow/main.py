from fastapi import FastAPI

from reviewflow import __version__
from reviewflow.api.code_owners import router as code_owners_router
from reviewflow.core.config import config
from reviewflow.core.utils.logging import configure_logging

# --- Application Setup ---

configure_logging(config.logging)
config.validate()

app = FastAPI(
    title="Reviewflow",
    description="Review-owner resolution from CODEOWNERS files.",
    version=__version__,
)

# --- Include Routers ---

app.include_router(code_owners_router, prefix="/api/v1", tags=["Code Owners"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "Reviewflow is running."}
