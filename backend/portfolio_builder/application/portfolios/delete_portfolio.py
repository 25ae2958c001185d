from flask import current_app
from portfolio_builder.extensions import db
from portfolio_builder.utils.transaction import transactional
from .queries import get_portfolio


def delete_portfolio(
    *,
    owner_id: str,
    portfolio_id: int,
) -> None:
    """Hard-delete a portfolio owned by `owner_id`."""
    portfolio = get_portfolio(owner_id=owner_id, portfolio_id=portfolio_id)

    with transactional("portfolio.delete"):
        db.session.delete(portfolio)

    current_app.logger.info("portfolio.delete id=%s owner=%s", portfolio_id, owner_id)
