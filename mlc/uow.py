import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mlc.db import IMMEDIATE
from mlc.errors.common import InternalError

logger = logging.getLogger(__name__)


class UnitOfWork:
    """All writes inside the `with` block are committed together or not at all.

    Database failures are re-raised as InternalError, application errors
    propagate unchanged after the rollback.
    """

    def __init__(self, db: Session):
        self.db = db

    def __getattr__(self, attr):
        """
        Delegate attribute access to the underlying session.
        This allows the UoW to be used as if it were a Session.
        """
        return getattr(self.db, attr)

    def __enter__(self):
        # a read transaction left open by earlier queries would turn into a
        # deferred write; close it so the unit of work begins its own
        try:
            if self.db.in_transaction():
                self.db.commit()
            self.db.connection(execution_options={IMMEDIATE: True})
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Could not begin a transaction: %s", exc)
            raise InternalError("database") from exc
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            # Roll back if an exception occurred.
            self.db.rollback()
            if issubclass(exc_type, SQLAlchemyError):
                logger.error("Transaction rolled back: %s", exc_val)
                raise InternalError("database") from exc_val
            return False
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Commit failed: %s", exc)
            raise InternalError("database") from exc
        return False
