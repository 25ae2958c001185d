from typing import Any, Dict
from flask import current_app
from portfolio_builder.extensions import db
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.domain.invariants.layout import assert_layout
from portfolio_builder.domain.invariants.portfolio import assert_name
from portfolio_builder.utils.transaction import transactional


def create_portfolio(
    *,
    owner_id: str,
    data: Dict[str, Any],
) -> Portfolio:
    """
    Create a new, unpublished portfolio for `owner_id`.

    Edge cases handled:
    - Missing or blank name
    - Missing layout (defaults to an empty document)
    - Invalid layout envelope or component props
    """
    name = data.get("name")
    layout = data.get("layout", {"components": []})

    assert_name(name)
    assert_layout(layout)

    portfolio = Portfolio()
    portfolio.user_id = owner_id
    portfolio.name = name
    portfolio.layout = layout
    portfolio.is_published = False

    with transactional("portfolio.create"):
        db.session.add(portfolio)

    current_app.logger.info(
        "portfolio.create id=%s owner=%s components=%d",
        portfolio.id,
        owner_id,
        len(layout["components"]),
    )
    return portfolio
