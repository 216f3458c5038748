import importlib
import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

log = logging.getLogger(__name__)

Base = declarative_base()

# Every model module, so Base.metadata is complete before create_all.
MODEL_MODULES = [
    "foodtruck.models.user",
    "foodtruck.models.truck",
    "foodtruck.models.menu_item",
    "foodtruck.models.user_session",
    "foodtruck.models.cart_entry",
    "foodtruck.models.order",
]


class Database:
    """
    Data-access handle: one engine plus the session factory bound to it.

    Built once per process by ``create_app`` and handed to request handlers
    through ``get_db``; ``dispose`` closes the pool at shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {}
        if url.startswith("sqlite"):
            # sessions are used from the threadpool FastAPI runs sync routes in
            connect_args["check_same_thread"] = False
        self.engine = create_engine(url, future=True, echo=echo, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self, reset: bool = False) -> None:
        for mod in MODEL_MODULES:
            importlib.import_module(mod)
        if reset:
            log.warning("Dropping all tables")
            Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        log.info("Database initialized", extra={"tables": len(Base.metadata.tables)})

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
