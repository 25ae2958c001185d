from .user import User
from .portfolio import Portfolio

__all__ = ["User", "Portfolio"]
