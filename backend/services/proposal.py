# =============================================================================
# SKIN PROPOSAL BACKEND - PROPOSAL SERVICE
# =============================================================================
"""
Orchestrates one proposal request: face detection, scoring and report
generation. Both API clients are built per request and closed afterwards.
"""

import logging
from typing import Awaitable, Callable

from config import ServiceAccountCredentials, Settings
from errors import DetectionError
from models import ProposalResponse
from services.prompt_builder import build_prompt
from services.report_client import ReportClient
from services.skin_scoring import SkinScoringEngine
from services.vision_client import VisionClient

logger = logging.getLogger(__name__)


class ProposalService:
    """
    Orchestrates the stateless proposal flow:
    1. Detects the face with Vision
    2. Calculates skin scores
    3. Builds the prompt and generates the report with Gemini
    """

    def __init__(self, vision: VisionClient, reporter: ReportClient):
        self.vision = vision
        self.reporter = reporter
        self.scoring = SkinScoringEngine()

    async def generate(self, image: bytes) -> ProposalResponse:
        """Run the full proposal pipeline for one front image."""

        # 1. Face detection
        faces = await self.vision.detect_faces(image)
        if not faces:
            raise DetectionError("No face detected in the front image.")
        face = faces[0]

        # 2. Scoring
        scores = self.scoring.calculate(face)
        logger.info(f"Skin scores: {scores.model_dump()}")

        # 3. Report
        prompt = build_prompt(scores, face)
        report_html = await self.reporter.generate_report(prompt)

        return ProposalResponse(report_html=report_html, scores=scores)

    async def close(self) -> None:
        """Close both API clients."""
        try:
            await self.vision.close()
        finally:
            await self.reporter.close()


ServiceFactory = Callable[[ServiceAccountCredentials, Settings], Awaitable[ProposalService]]


async def create_proposal_service(credentials: ServiceAccountCredentials, settings: Settings) -> ProposalService:
    """Build both API clients for one request."""
    vision = VisionClient(credentials, timeout=settings.vision_timeout)
    try:
        reporter = ReportClient(
            credentials,
            model=settings.gemini_model,
            location=settings.gcp_location,
            timeout=settings.generation_timeout,
        )
    except Exception:
        await vision.close()
        raise
    return ProposalService(vision=vision, reporter=reporter)


def get_service_factory() -> ServiceFactory:
    """Dependency returning the per-request service factory."""
    return create_proposal_service
