# =============================================================================
# SKIN PROPOSAL BACKEND - SKIN SCORING ENGINE
# =============================================================================
"""
Skin Scoring Engine that turns Vision API face likelihoods into 0-100 scores.
Each categorical likelihood is mapped to its position on the six-level scale
and weighted by 20 points.
"""

import logging
import math
from dataclasses import dataclass

from models import ScoreSet

logger = logging.getLogger(__name__)

# Ordered Vision API likelihood scale
LIKELIHOODS = (
    "UNKNOWN",
    "VERY_UNLIKELY",
    "UNLIKELY",
    "POSSIBLE",
    "LIKELY",
    "VERY_LIKELY",
)

# Points per step on the likelihood scale
LIKELIHOOD_STEP = 20


@dataclass
class FaceAnnotation:
    """Facial attributes of the first face returned by face detection."""
    joy_likelihood: str = "UNKNOWN"
    sorrow_likelihood: str = "UNKNOWN"
    surprise_likelihood: str = "UNKNOWN"
    under_exposed_likelihood: str = "UNKNOWN"
    blurred_likelihood: str = "UNKNOWN"
    tilt_angle: float = 0.0


def likelihood_index(value: str) -> int:
    """Position of a likelihood on the scale, -1 when unrecognised."""
    try:
        return LIKELIHOODS.index(value)
    except ValueError:
        logger.warning(f"Unrecognised likelihood value: {value!r}")
        return -1


def likelihood_score(value: str) -> int:
    """Likelihood mapped onto 0-100 (UNKNOWN=0, VERY_LIKELY=100)."""
    return likelihood_index(value) * LIKELIHOOD_STEP


def finalize(score: float) -> int:
    """Round half up to an integer, then clamp to 0-100."""
    return max(0, min(math.floor(score + 0.5), 100))


class SkinScoringEngine:
    """
    Skin Scoring Engine.

    Derives five scores from a FaceAnnotation:
    - smoothness: joy and sorrow (expression lines)
    - firmness: head tilt and surprise
    - dullness: under-exposure
    - spots, pores: blur (both from the same signal)
    """

    def calculate(self, face: FaceAnnotation) -> ScoreSet:
        """
        Calculate the skin score set.

        Args:
            face: First detected face annotation

        Returns:
            ScoreSet with every field clamped to 0-100
        """
        joy = likelihood_score(face.joy_likelihood)
        sorrow = likelihood_score(face.sorrow_likelihood)
        smoothness = 100 - (joy + sorrow) / 2

        tilt_angle_score = 100 - abs(face.tilt_angle)
        surprise = likelihood_score(face.surprise_likelihood)
        firmness = (tilt_angle_score + (100 - surprise)) / 2

        under_exposed = likelihood_score(face.under_exposed_likelihood)
        dullness = 100 - under_exposed

        blurred = likelihood_score(face.blurred_likelihood)
        spots = 100 - blurred
        pores = 100 - blurred

        scores = ScoreSet(
            dullness=finalize(dullness),
            smoothness=finalize(smoothness),
            firmness=finalize(firmness),
            spots=finalize(spots),
            pores=finalize(pores),
        )

        logger.debug(
            f"Skin scores calculated: {scores.model_dump()} "
            f"(tilt={face.tilt_angle:.2f})"
        )

        return scores


def calculate_scores(face: FaceAnnotation) -> ScoreSet:
    """
    Convenience function for skin score calculation.

    Args:
        face: First detected face annotation

    Returns:
        ScoreSet with every field clamped to 0-100
    """
    return SkinScoringEngine().calculate(face)
