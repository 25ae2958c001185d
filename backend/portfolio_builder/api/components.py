from flask import request, jsonify
from portfolio_builder.domain.components import CATEGORIES, list_definitions
from . import api_bp


@api_bp.route("/components", methods=["GET"])
def list_components():
    category = request.args.get("category")

    if category and category not in CATEGORIES:
        return jsonify({"error": "BadRequest", "message": "Unknown category"}), 400

    return jsonify(list_definitions(category)), 200
