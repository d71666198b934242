# =============================================================================
# SKIN PROPOSAL BACKEND - PROPOSAL ROUTES
# =============================================================================
"""
API route that turns an uploaded front-face photo into a treatment proposal.
Only POST is served; every other method answers 405 before any work is done.
All pipeline failures collapse into a 500 JSON envelope of the form {message}.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from config import Settings, get_settings, load_credentials
from errors import MethodNotAllowed, ProposalError, ValidationError
from services.proposal import ServiceFactory, get_service_factory

logger = logging.getLogger(__name__)
router = APIRouter()

FRONT_IMAGE_FIELD = "frontImage"
FALLBACK_ERROR_MESSAGE = "An unknown error occurred on the server."

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def ensure_post(request: Request) -> None:
    """Reject anything but POST."""
    if request.method != "POST":
        raise MethodNotAllowed("Method Not Allowed")


async def read_front_image(request: Request) -> bytes:
    """Read the frontImage file field from a multipart body."""
    try:
        form = await request.form()
    except (HTTPException, MultiPartException) as e:
        detail = getattr(e, "detail", None) or str(e)
        raise ValidationError(f"Invalid multipart body: {detail}") from e
    front_image = form.get(FRONT_IMAGE_FIELD)
    if not isinstance(front_image, UploadFile):
        raise ValidationError("Front image not found.")
    return await front_image.read()


def error_response(error: Exception) -> JSONResponse:
    """Uniform 500 JSON error envelope."""
    return JSONResponse(
        status_code=500,
        content={"message": str(error) or FALLBACK_ERROR_MESSAGE}
    )


@router.api_route("/generate-proposal", methods=ALL_METHODS)
async def generate_proposal(
    request: Request,
    settings: Settings = Depends(get_settings),
    service_factory: ServiceFactory = Depends(get_service_factory)
):
    """
    Generate a personalised treatment proposal.

    1. Loads the service account credentials
    2. Reads the frontImage upload
    3. Detects the face and scores it
    4. Generates the HTML report with Gemini
    """
    try:
        ensure_post(request)
    except MethodNotAllowed as e:
        logger.warning(f"Rejected {request.method} request to {request.url.path}")
        return PlainTextResponse(str(e), status_code=e.status_code, headers={"Allow": "POST"})

    try:
        credentials = load_credentials(settings)
        image = await read_front_image(request)
        logger.info(f"Received front image ({len(image)} bytes)")

        service = await service_factory(credentials, settings)
        try:
            result = await service.generate(image)
        finally:
            await service.close()

    except ProposalError as e:
        logger.error(f"AI analysis failed ({type(e).__name__}): {e}")
        return error_response(e)

    except Exception as e:
        logger.exception(f"AI analysis failed: {e}")
        return error_response(e)

    return JSONResponse(content=result.model_dump(by_alias=True))
