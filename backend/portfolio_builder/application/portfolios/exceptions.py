class PortfolioNotFound(LookupError):
    """
    The portfolio does not exist or belongs to another user.

    Both cases are reported identically so callers cannot discover
    other users' portfolios.
    """

    def __init__(self, portfolio_id):
        super().__init__("Portfolio not found")
        self.portfolio_id = portfolio_id
