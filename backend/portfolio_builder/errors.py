from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.application.portfolios.exceptions import PortfolioNotFound


def _error(name, message, status):
    response = jsonify({
        "error": name,
        "message": message
    })
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error("InvariantViolation", str(error), 400)

    @app.errorhandler(PortfolioNotFound)
    def handle_portfolio_not_found(error):
        return _error("NotFound", str(error), 404)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return _error(error.name.replace(" ", ""), error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Unhandled error: %s", error)
        return _error("InternalServerError", "Internal server error", 500)


def register_jwt_handlers(jwt):
    @jwt.unauthorized_loader
    def missing_token(reason):
        return _error("Unauthorized", reason, 401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _error("Unauthorized", reason, 401)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _error("Unauthorized", "Token has expired", 401)
