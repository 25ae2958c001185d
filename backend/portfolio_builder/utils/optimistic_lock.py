from flask import request, abort
from datetime import timezone
from dateutil.parser import parse, ParserError
from portfolio_builder.extensions import db


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _release_and_abort(code, description):
    # The row may be held FOR UPDATE; free it before the request errors out
    db.session.rollback()
    abort(code, description=description)


def enforce_optimistic_lock(entity):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.

    Clients send the updatedAt they last saw. A row changed after that
    point aborts with 409 Conflict. Without the header the update is
    last-write-wins.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError, ValueError):
        _release_and_abort(400, "Invalid If-Unmodified-Since header")

    if entity.updated_at is None:
        return

    server_ts = normalize_ts(entity.updated_at)

    if server_ts > client_ts:
        _release_and_abort(
            409,
            "Conflict detected. Portfolio has been modified since it was loaded.",
        )
