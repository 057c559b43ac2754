# product_api/api/routers/health.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_api.data.database import get_db
from product_api.domain.schemas import HealthOut
from product_api.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthz", response_model=HealthOut)
def healthz():
    return HealthOut(status="healthy")


@router.get("/readyz", response_model=HealthOut)
def readyz(db: Session = Depends(get_db)):
    """Ready only when the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable")
    return HealthOut(status="ready")
