import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from biztime.core.errors import validation_failure

logger = logging.getLogger(__name__)


def commit_or_reject(db: Session, message: str):
    """
    Commit the pending change. A constraint violation (dangling foreign key,
    NULL in a NOT NULL column, duplicate key) is rolled back and raised as a
    validation failure carrying `message`; the store is left unchanged.
    Any other store error propagates as-is.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Integrity error rejected: %s", e.orig)
        raise validation_failure(message) from e
