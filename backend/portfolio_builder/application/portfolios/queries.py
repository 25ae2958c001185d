from typing import List
from sqlalchemy import select
from portfolio_builder.extensions import db
from portfolio_builder.models.portfolio import Portfolio
from .exceptions import PortfolioNotFound


def get_portfolio(*, owner_id: str, portfolio_id: int, for_update: bool = False) -> Portfolio:
    """
    Fetch a portfolio scoped to its owner.

    The owner filter is part of the SQL predicate, never a post-check.
    """
    stmt = select(Portfolio).where(
        Portfolio.id == portfolio_id,
        Portfolio.user_id == owner_id,
    )
    if for_update:
        stmt = stmt.with_for_update()

    portfolio = db.session.execute(stmt).scalar_one_or_none()
    if portfolio is None:
        raise PortfolioNotFound(portfolio_id)
    return portfolio


def list_portfolios(*, owner_id: str) -> List[Portfolio]:
    return list(
        db.session.execute(
            select(Portfolio)
            .where(Portfolio.user_id == owner_id)
            .order_by(Portfolio.updated_at.desc(), Portfolio.id.desc())
        ).scalars()
    )
