from flask import request, jsonify, g, current_app
from flask_jwt_extended import (
    create_access_token,
    set_access_cookies,
    unset_jwt_cookies,
)
from sqlalchemy.exc import IntegrityError
from portfolio_builder.extensions import db
from portfolio_builder.models.user import User
from portfolio_builder.normalizers.user import normalize_user
from portfolio_builder.utils.decorators import login_required
from portfolio_builder.utils.transaction import transactional
from . import api_bp


def _session_response(user, status):
    """Body carries the token for API clients; the cookie serves browsers."""
    access_token = create_access_token(identity=user.id)

    response = jsonify({
        "user": normalize_user(user),
        "accessToken": access_token,
    })
    response.status_code = status
    set_access_cookies(response, access_token)
    return response


@api_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "BadRequest", "message": "Invalid request body"}), 400

    email = (data.get("email") or "").strip().lower()
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "BadRequest", "message": "Email and password required"}), 400

    if User.query.filter_by(email=email).first():
        return jsonify({"error": "BadRequest", "message": "User already exists"}), 400

    user = User()
    user.email = email
    user.first_name = data.get("firstName")
    user.last_name = data.get("lastName")
    user.set_password(password)

    try:
        with transactional("user.register"):
            db.session.add(user)
    except IntegrityError:
        # Lost a race against a concurrent registration with the same email
        return jsonify({"error": "BadRequest", "message": "User already exists"}), 400

    current_app.logger.info("user.register id=%s", user.id)
    return _session_response(user, 201)


@api_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "BadRequest", "message": "Invalid request body"}), 400

    email = (data.get("email") or "").strip().lower()
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "BadRequest", "message": "Email and password required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        current_app.logger.info("user.login_failed email=%s", email)
        return jsonify({"error": "Unauthorized", "message": "Incorrect email or password"}), 401

    return _session_response(user, 200)


@api_bp.route("/logout", methods=["GET"])
def logout():
    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response


@api_bp.route("/auth/user", methods=["GET"])
@login_required
def current_user():
    return jsonify(normalize_user(g.current_user)), 200
