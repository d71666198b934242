# =============================================================================
# SKIN PROPOSAL BACKEND - API MODELS
# =============================================================================
"""
Pydantic models for API responses.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ScoreSet(BaseModel):
    dullness: int = Field(..., ge=0, le=100)
    smoothness: int = Field(..., ge=0, le=100)
    firmness: int = Field(..., ge=0, le=100)
    spots: int = Field(..., ge=0, le=100)
    pores: int = Field(..., ge=0, le=100)


class ProposalResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    report_html: str = Field(..., alias="reportHtml")
    scores: ScoreSet


class ErrorResponse(BaseModel):
    message: str


class Treatment(BaseModel):
    category: str
    name: str
    description: str
    price: int


class TreatmentList(BaseModel):
    count: int
    category: Optional[str] = None
    treatments: list[Treatment]
