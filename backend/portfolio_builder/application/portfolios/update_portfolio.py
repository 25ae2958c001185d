from typing import Any, Dict
from flask import current_app
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.domain.invariants.layout import assert_layout
from portfolio_builder.domain.invariants.portfolio import assert_name
from portfolio_builder.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("name", "layout")


def update_portfolio(
    *,
    portfolio: Portfolio,
    data: Dict[str, Any],
) -> Portfolio:
    """
    Apply a partial {name?, layout?} update to an owner-scoped portfolio.

    Design rules:
    - Only whitelisted fields are mutable
    - A body with none of them is rejected
    - The layout is replaced wholesale, never merged
    - Without an optimistic lock check upstream, last write wins
    """
    if not isinstance(data, dict) or not any(f in data for f in ALLOWED_UPDATE_FIELDS):
        raise InvariantViolation("No valid fields provided for update")

    if "name" in data:
        assert_name(data["name"])
    if "layout" in data:
        assert_layout(data["layout"])

    changed_fields: list[str] = []

    with transactional("portfolio.update"):
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(portfolio, field) != data[field]:
                setattr(portfolio, field, data[field])
                changed_fields.append(field)

    current_app.logger.info(
        "portfolio.update id=%s fields=%s",
        portfolio.id,
        ",".join(changed_fields) or "-",
    )
    return portfolio
