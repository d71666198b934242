# =============================================================================
# SKIN PROPOSAL BACKEND - FASTAPI APPLICATION
# =============================================================================
"""
Main FastAPI application for the Skin Proposal API.
Analyses an uploaded face photo with Cloud Vision and writes a treatment
proposal with Gemini.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from routes import proposal, treatments
from services.treatments import get_treatments

# Configure logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Logs the effective configuration at startup.
    """
    logger.info("🚀 Starting Skin Proposal Backend...")

    if settings.gcp_sa_key_base64:
        logger.info("✓ GCP service account key configured")
    else:
        logger.warning("GCP_SA_KEY_BASE64 is not set; proposal requests will fail until it is")

    logger.info(f"✓ Gemini model: {settings.gemini_model} ({settings.gcp_location})")
    logger.info(f"✓ Treatment catalog: {len(get_treatments())} entries")

    yield

    logger.info("✓ Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Skin Proposal API",
    description="Face analysis and personalised treatment proposals",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS for frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(proposal.router, prefix="/api", tags=["Proposal"])
app.include_router(treatments.router, prefix="/api", tags=["Treatments"])


@app.get("/health")
async def health_check():
    """
    Health check endpoint for container orchestration.
    Returns service status and configuration info.
    """
    return {
        "status": "ok",
        "service": "skin-proposal-backend",
        "credentials_configured": bool(settings.gcp_sa_key_base64),
        "model": settings.gemini_model,
        "location": settings.gcp_location
    }


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Skin Proposal API",
        "docs": "/docs",
        "health": "/health"
    }
