import logging

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError

from foodtruck.utils.clock import utcnow

router = APIRouter()
log = logging.getLogger(__name__)


@router.get("/public/health", tags=["health"])
def health(request: Request):
    db_ok = False
    try:
        db_ok = request.app.state.db.ping()
    except SQLAlchemyError:
        log.exception("health check: database unreachable")
    return {
        "status": "ok" if db_ok else "degraded",
        "db": db_ok,
        "timestamp": utcnow().isoformat(),
        "service": request.app.title,
    }
