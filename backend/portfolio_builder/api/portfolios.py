# portfolio_builder/api/portfolios.py
from flask import g, request, jsonify, make_response
from portfolio_builder.application.portfolios import (
    get_portfolio,
    list_portfolios,
    create_portfolio,
    update_portfolio,
    delete_portfolio,
    publish_portfolio,
)
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.normalizers.portfolio import normalize_portfolio
from portfolio_builder.rendering import render_page
from portfolio_builder.utils.decorators import login_required
from portfolio_builder.utils.optimistic_lock import enforce_optimistic_lock
from . import api_bp


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object.")
    return data


@api_bp.route("/portfolios", methods=["GET"])
@login_required
def list_portfolios_view():
    portfolios = list_portfolios(owner_id=g.current_user.id)
    return jsonify([normalize_portfolio(p) for p in portfolios]), 200


@api_bp.route("/portfolios", methods=["POST"])
@login_required
def create_portfolio_view():
    portfolio = create_portfolio(owner_id=g.current_user.id, data=_json_body())
    return jsonify(normalize_portfolio(portfolio)), 201


@api_bp.route("/portfolios/<int:portfolio_id>", methods=["GET"])
@login_required
def get_portfolio_view(portfolio_id):
    portfolio = get_portfolio(owner_id=g.current_user.id, portfolio_id=portfolio_id)
    return jsonify(normalize_portfolio(portfolio)), 200


@api_bp.route("/portfolios/<int:portfolio_id>", methods=["PUT"])
@login_required
def update_portfolio_view(portfolio_id):
    data = _json_body()
    portfolio = get_portfolio(
        owner_id=g.current_user.id,
        portfolio_id=portfolio_id,
        for_update=True,
    )

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(portfolio)

    portfolio = update_portfolio(portfolio=portfolio, data=data)
    return jsonify(normalize_portfolio(portfolio)), 200


@api_bp.route("/portfolios/<int:portfolio_id>", methods=["DELETE"])
@login_required
def delete_portfolio_view(portfolio_id):
    delete_portfolio(owner_id=g.current_user.id, portfolio_id=portfolio_id)
    return jsonify({"success": True}), 200


@api_bp.route("/portfolios/<int:portfolio_id>/publish", methods=["POST"])
@login_required
def publish_portfolio_view(portfolio_id):
    data = _json_body()
    portfolio = publish_portfolio(
        owner_id=g.current_user.id,
        portfolio_id=portfolio_id,
        site_name=data.get("siteName"),
    )
    return jsonify(normalize_portfolio(portfolio)), 200


@api_bp.route("/portfolios/<int:portfolio_id>/preview", methods=["GET"])
@login_required
def preview_portfolio_view(portfolio_id):
    portfolio = get_portfolio(owner_id=g.current_user.id, portfolio_id=portfolio_id)
    layout = portfolio.layout or {}

    html = render_page(
        layout.get("components", []),
        title=portfolio.name,
        theme=layout.get("theme"),
    )
    response = make_response(html, 200)
    response.mimetype = "text/html"
    return response
