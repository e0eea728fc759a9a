"""Unit-of-work helper shared by the service classes."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from subscriptions_api.exceptions import DataAccessError

logger = logging.getLogger(__name__)


@contextmanager
def unit_of_work(session: Session, action: str) -> Iterator[Session]:
    """
    Run one service operation as a single transaction.

    Commits when the block finishes. Any SQLAlchemy error rolls the whole
    block back and is re-raised as DataAccessError naming ``action``.
    Domain errors raised inside the block propagate unchanged; nothing is
    committed for them.
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Data access failure while trying to %s", action)
        raise DataAccessError(f"Failed to {action}") from exc
