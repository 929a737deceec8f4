"""Health check endpoint."""

from fastapi import APIRouter

from labelarr.config import VERSION
from labelarr.templates import get_registry

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    """Report service version and how many built-in variables are registered."""
    return {"status": "healthy", "version": VERSION, "variables": len(get_registry())}
