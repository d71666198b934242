"""
Read-only listing of the clinic treatment catalog.
"""

from typing import Optional

from fastapi import APIRouter, Query

from models import TreatmentList
from services.treatments import find_treatments

router = APIRouter()


@router.get("/treatments", response_model=TreatmentList)
async def list_treatments(
    category: Optional[str] = Query(
        default=None,
        description="Category label (e.g. しわ) or key (e.g. wrinkles)"
    )
):
    """List catalog treatments, optionally filtered by category."""
    treatments = find_treatments(category)
    return TreatmentList(count=len(treatments), category=category, treatments=treatments)
