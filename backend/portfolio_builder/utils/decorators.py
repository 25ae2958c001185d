from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from portfolio_builder.extensions import db
from portfolio_builder.models.user import User

def login_required(fn):
    """
    Require a valid access token and load its user into g.current_user.

    Tokens for users that no longer exist are treated as unauthenticated.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        user = db.session.get(User, get_jwt_identity())
        if user is None:
            return jsonify({"error": "Unauthorized", "message": "Unauthorized"}), 401

        g.current_user = user
        return fn(*args, **kwargs)
    return wrapper
