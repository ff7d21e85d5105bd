"""Billing API: FastAPI entry point.

Registers middleware, routers, and lifecycle hooks. Each vertical
adds its own router under /api/{vertical}/.
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.observability.log_setup import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://localhost:3001"
).split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "false").lower() == "true"

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    configure_logging(LOG_LEVEL, json_logs=LOG_JSON)
    # Startup: import renderer to auto-register with template engine
    import verticals.billing.renderer  # noqa: F401

    logger.info("api_started", verticals=["billing"])
    yield
    logger.info("api_stopped")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Billing Rules",
    description="Subscription eligibility validation and pricing",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers: verticals register here
# ---------------------------------------------------------------------------

from verticals.billing.router import router as billing_router  # noqa: E402

app.include_router(billing_router, prefix="/api/billing", tags=["Billing"])


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "0.1.0"}


@app.get("/")
async def root():
    return {
        "name": "Billing Rules",
        "version": "0.1.0",
        "docs": "/docs",
        "verticals": ["billing"],
    }
