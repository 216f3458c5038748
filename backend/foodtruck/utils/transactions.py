from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from foodtruck.errors import PersistenceError


@contextmanager
def smart_transaction(session: Session) -> Iterator[Session]:
    """
    Run the block as one unit of work on the given Session.

    Works whether or not the session already autobegan a transaction (a read
    before the block is enough for that): everything done so far plus the
    block is committed together on success and rolled back on any error.
    A store failure surfaces as PersistenceError; integrity violations are
    re-raised as is so callers can turn them into domain errors.
    Usage:
        with smart_transaction(db):
            ... DB work ...
    """
    try:
        yield session
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError() from exc
    except Exception:
        session.rollback()
        raise
