import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
def health():
    # Liveness only, never touches the database
    return {"status": "Server is running", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api/health/db")
def health_db(db: Session = Depends(get_db)):
    """Round-trip a trivial query through the pool."""
    try:
        db_time = db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
        return {"status": "Database connected", "timestamp": str(db_time)}
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"status": "Database error", "error": str(e)},
        )
