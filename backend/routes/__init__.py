"""API routers for the Skin Proposal backend."""
from .proposal import router as proposal_router
from .treatments import router as treatments_router

__all__ = [
    "proposal_router",
    "treatments_router",
]
