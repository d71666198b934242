# =============================================================================
# SKIN PROPOSAL BACKEND - SERVICES PACKAGE
# =============================================================================
"""Services module exports."""

from .skin_scoring import FaceAnnotation, SkinScoringEngine, calculate_scores
from .prompt_builder import build_prompt
from .vision_client import VisionClient
from .report_client import ReportClient
from .proposal import ProposalService

__all__ = [
    "FaceAnnotation",
    "SkinScoringEngine",
    "calculate_scores",
    "build_prompt",
    "VisionClient",
    "ReportClient",
    "ProposalService"
]
