from .exceptions import PortfolioNotFound
from .queries import get_portfolio, list_portfolios
from .create_portfolio import create_portfolio
from .update_portfolio import update_portfolio
from .delete_portfolio import delete_portfolio
from .publish_portfolio import publish_portfolio

__all__ = [
    "PortfolioNotFound",
    "get_portfolio",
    "list_portfolios",
    "create_portfolio",
    "update_portfolio",
    "delete_portfolio",
    "publish_portfolio",
]
