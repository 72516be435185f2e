"""
Health checks: a liveness probe and a readiness probe that reads the
restaurants table.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flavorfare.core.config import get_settings
from flavorfare.db.session import get_db
from flavorfare.models.restaurant import Restaurant

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])
settings = get_settings()


@router.get("/health")
async def health_check():
    """Liveness - always returns OK."""
    return {"status": "ok"}


@router.get(f"{settings.API_PREFIX}/health")
def api_health_check(db: Session = Depends(get_db)):
    """
    Readiness - the restaurants table must be queryable.

    Returns 200 with the stored restaurant count, or 503 if the query fails
    (database down, schema not migrated).
    """
    try:
        count = db.execute(select(func.count()).select_from(Restaurant)).scalar_one()
    except SQLAlchemyError as e:
        logger.warning("Health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": {"status": "error", "message": str(e)},
            }
        )

    return {
        "status": "ok",
        "database": {"status": "ok", "restaurants": count},
    }
