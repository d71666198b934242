# =============================================================================
# SKIN PROPOSAL BACKEND - GEMINI REPORT CLIENT
# =============================================================================
"""
Async client for report generation with Gemini on Vertex AI.
Sends the proposal prompt and returns the HTML of the first candidate.
"""

import logging
from typing import Any, Optional

import httpx
from google import genai
from google.auth import exceptions as auth_exceptions
from google.genai import errors as genai_errors
from google.genai import types

from config import ServiceAccountCredentials
from errors import UpstreamError

logger = logging.getLogger(__name__)


def extract_report_html(response: Any) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a generation response.

    Raises:
        UpstreamError: if any level of that path is missing
    """
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError) as e:
        raise UpstreamError("Gemini returned a malformed response.") from e

    if text is None:
        raise UpstreamError("Gemini returned a malformed response.")
    return text


class ReportClient:
    """Async Gemini client bound to one service account and model."""

    def __init__(
        self,
        credentials: ServiceAccountCredentials,
        model: str,
        location: str,
        timeout: float,
        client: Optional[genai.Client] = None
    ):
        self.model = model
        self.timeout = timeout
        self._client = client or genai.Client(
            vertexai=True,
            project=credentials.project_id,
            location=location,
            credentials=credentials.to_google_credentials(),
            http_options=types.HttpOptions(timeout=int(timeout * 1000)),
        )

    async def generate_report(self, prompt: str) -> str:
        """
        Generate the HTML proposal report.

        Raises:
            UpstreamError: on API/transport failure or a malformed response
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt
            )

        except httpx.TimeoutException as e:
            logger.warning(f"Gemini request timed out after {self.timeout}s")
            raise UpstreamError("Gemini request timed out.") from e

        except httpx.HTTPError as e:
            logger.warning(f"Cannot reach Gemini: {e}")
            raise UpstreamError(f"Cannot reach Gemini: {e}") from e

        except genai_errors.APIError as e:
            logger.warning(f"Gemini API error {e.code}: {e.message}")
            raise UpstreamError(f"Gemini API error: {e.message}") from e

        except auth_exceptions.GoogleAuthError as e:
            logger.error(f"Gemini authentication failed: {e}")
            raise UpstreamError(f"Gemini authentication failed: {e}") from e

        report_html = extract_report_html(response)
        logger.info(f"Gemini report generated: model={self.model}, chars={len(report_html)}")
        return report_html

    async def close(self) -> None:
        """Close the underlying async HTTP session."""
        await self._client.aio.aclose()
