"""
Readiness check – verify database connectivity.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logger import logger
from app.db.database import get_db

router = APIRouter()


def _check_database(db: Session) -> tuple[str, str]:
    """Returns (status, detail). Status is 'ok' or 'error'."""
    try:
        db.execute(text("SELECT 1"))
        return "ok", "Database reachable"
    except Exception as e:
        logger.exception("Database check failed")
        return "error", f"Database: {str(e)}"


@router.get("/ready")
def readiness(db: Session = Depends(get_db)):
    db_status, db_detail = _check_database(db)
    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "database": {"status": db_status, "detail": db_detail},
        "summarizer": {"model_id": settings.BEDROCK_MODEL_ID},
    }
