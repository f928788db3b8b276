"""Health check endpoints."""

from fastapi import APIRouter

from ..context import ContextDep

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(ctx: ContextDep) -> dict:
    """Basic health check endpoint with loaded dataset sizes."""
    return {
        "status": "healthy",
        "legislators": len(ctx.legislators),
        "districts": len(ctx.districts),
    }
