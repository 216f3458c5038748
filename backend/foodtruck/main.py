import logging
from contextlib import asynccontextmanager
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from foodtruck.api.health import router as health_router
from foodtruck.api.routes_cart import router as cart_router
from foodtruck.api.routes_menu import router as menu_router
from foodtruck.api.routes_order import router as order_router
from foodtruck.api.routes_truck import router as truck_router
from foodtruck.api.routes_user import router as user_router
from foodtruck.config import Settings, settings as default_settings
from foodtruck.db import Database
from foodtruck.errors import FoodTruckError, PersistenceError
from foodtruck.logging_config import configure_logging
from foodtruck.services.auth_service import AuthService

log = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def start_session_purge(app: FastAPI) -> Optional[BackgroundScheduler]:
    interval = app.state.settings.SESSION_PURGE_INTERVAL_SECONDS
    if interval <= 0:
        return None

    scheduler = BackgroundScheduler()

    def purge_job():
        db = app.state.db.session()
        try:
            AuthService(db, app.state.settings).purge_expired_sessions()
        except (SQLAlchemyError, PersistenceError):
            log.exception("session purge failed")
        finally:
            db.close()

    scheduler.add_job(purge_job, "interval", seconds=interval, id="purge_expired_sessions")
    scheduler.start()
    return scheduler


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    app.state.db.init_db()
    scheduler = start_session_purge(app)
    log.info("Startup complete")
    try:
        yield
    finally:
        if scheduler:
            scheduler.shutdown(wait=False)
        app.state.db.dispose()
        log.info("Shutdown complete")


def _error_response(status_code: int, detail: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FoodTruckError)
    async def handle_domain_error(request: Request, exc: FoodTruckError):
        if exc.status_code >= 500:
            log.error(
                "request failed: %s",
                exc.detail,
                exc_info=exc.__cause__ or exc,
                extra={"path": request.url.path},
            )
        return _error_response(exc.status_code, exc.detail, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(request: Request, exc: RequestValidationError):
        problems = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
            problems.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
        return _error_response(400, "; ".join(problems) or "Invalid request")

    @app.exception_handler(SQLAlchemyError)
    async def handle_persistence_error(request: Request, exc: SQLAlchemyError):
        log.error(
            "persistence error: %s",
            type(exc).__name__,
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return _error_response(500, "Internal server error")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application around an explicit settings object and data-access handle.
    Nothing here touches the database until the lifespan starts.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Food Truck Ordering API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = database or Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(user_router, prefix=API_PREFIX)
    app.include_router(menu_router, prefix=API_PREFIX)
    app.include_router(truck_router, prefix=API_PREFIX)
    app.include_router(cart_router, prefix=API_PREFIX)
    app.include_router(order_router, prefix=API_PREFIX)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host=default_settings.APP_HOST, port=default_settings.APP_PORT)
