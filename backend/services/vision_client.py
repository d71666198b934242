# =============================================================================
# SKIN PROPOSAL BACKEND - VISION API CLIENT
# =============================================================================
"""
Async client for Google Cloud Vision face detection.
Converts face annotations into the FaceAnnotation dataclass used for scoring.
"""

import logging
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import vision

from config import ServiceAccountCredentials
from errors import UpstreamError
from services.skin_scoring import FaceAnnotation

logger = logging.getLogger(__name__)


def _likelihood_name(value) -> str:
    """Enum name of a Vision likelihood (int or enum member)."""
    try:
        return vision.Likelihood(value).name
    except ValueError:
        return str(value)


def to_face_annotation(face: vision.FaceAnnotation) -> FaceAnnotation:
    """Map a Vision API face annotation onto the scoring dataclass."""
    return FaceAnnotation(
        joy_likelihood=_likelihood_name(face.joy_likelihood),
        sorrow_likelihood=_likelihood_name(face.sorrow_likelihood),
        surprise_likelihood=_likelihood_name(face.surprise_likelihood),
        under_exposed_likelihood=_likelihood_name(face.under_exposed_likelihood),
        blurred_likelihood=_likelihood_name(face.blurred_likelihood),
        tilt_angle=float(face.tilt_angle),
    )


class VisionClient:
    """
    Async client for the Cloud Vision ImageAnnotator service.

    Only FACE_DETECTION is requested; one image per call.
    """

    def __init__(
        self,
        credentials: ServiceAccountCredentials,
        timeout: float,
        client: Optional[vision.ImageAnnotatorAsyncClient] = None
    ):
        self.timeout = timeout
        self._client = client or vision.ImageAnnotatorAsyncClient(
            credentials=credentials.to_google_credentials()
        )

    async def detect_faces(self, content: bytes) -> list[FaceAnnotation]:
        """
        Run face detection on raw image bytes.

        Returns:
            Face annotations in the order Vision returned them (may be empty)

        Raises:
            UpstreamError: on transport/API failure or a per-image error
        """
        request = vision.AnnotateImageRequest(
            image=vision.Image(content=content),
            features=[vision.Feature(type_=vision.Feature.Type.FACE_DETECTION)],
        )

        try:
            response = await self._client.batch_annotate_images(
                requests=[request],
                timeout=self.timeout
            )

        except google_exceptions.DeadlineExceeded as e:
            logger.warning(f"Vision API timed out after {self.timeout}s")
            raise UpstreamError("Vision API request timed out.") from e

        except google_exceptions.GoogleAPICallError as e:
            logger.warning(f"Vision API error: {e}")
            raise UpstreamError(f"Vision API error: {e.message}") from e

        except auth_exceptions.GoogleAuthError as e:
            logger.error(f"Vision API authentication failed: {e}")
            raise UpstreamError(f"Vision API authentication failed: {e}") from e

        if not response.responses:
            raise UpstreamError("Vision API returned an empty response.")

        result = response.responses[0]
        if result.error.message:
            logger.warning(f"Vision API image error: {result.error.message}")
            raise UpstreamError(f"Vision API error: {result.error.message}")

        faces = [to_face_annotation(f) for f in result.face_annotations]
        logger.info(f"Vision face detection complete: faces={len(faces)}")
        return faces

    async def close(self) -> None:
        """Close the underlying gRPC transport."""
        await self._client.transport.close()
