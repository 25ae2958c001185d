from contextlib import contextmanager
from flask import current_app
from portfolio_builder.extensions import db


@contextmanager
def transactional(action="-"):
    """
    One unit of work per write: commit on success, otherwise roll back,
    log the action that failed and re-raise.

    Rolling back also releases row locks taken with SELECT ... FOR UPDATE.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.warning(
            "transaction.rollback action=%s error=%s", action, type(exc).__name__
        )
        raise
