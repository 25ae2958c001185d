# portfolio_builder/editor/session.py
from typing import Any, Dict, Optional

from .client import PortfolioClient
from .store import EditorStore


class EditorSession:
    """
    Binds an EditorStore to the REST API.

    Saving never blocks further edits to the store: the layout is
    snapshotted before the request goes out. The last seen updatedAt is
    sent with each update, so a save based on a stale copy fails with a
    409 ApiError instead of overwriting newer data. Failed saves are not
    retried.
    """

    def __init__(self, store: EditorStore, client: PortfolioClient) -> None:
        self.store = store
        self.client = client
        self.theme: Optional[Dict[str, Any]] = None
        self.last_updated_at: Optional[str] = None

    def _bind(self, portfolio: Dict[str, Any]) -> None:
        self.last_updated_at = portfolio.get("updatedAt")
        self.theme = (portfolio.get("layout") or {}).get("theme")

    def open(self, portfolio_id: int) -> Dict[str, Any]:
        portfolio = self.client.get_portfolio(portfolio_id)
        layout = portfolio.get("layout") or {}
        self.store.load_portfolio(
            layout.get("components", []),
            portfolio["name"],
            portfolio["id"],
        )
        self._bind(portfolio)
        return portfolio

    def save(self) -> Dict[str, Any]:
        """Create on first save, update afterwards."""
        layout = self.store.to_layout(self.theme)
        name = self.store.portfolio_name

        self.store.set_saving(True)
        try:
            if self.store.portfolio_id is None:
                portfolio = self.client.create_portfolio(name, layout)
                self.store.set_portfolio_id(portfolio["id"])
            else:
                portfolio = self.client.update_portfolio(
                    self.store.portfolio_id,
                    name=name,
                    layout=layout,
                    unmodified_since=self.last_updated_at,
                )
        finally:
            self.store.set_saving(False)

        self._bind(portfolio)
        return portfolio

    def publish(self, site_name: str) -> Dict[str, Any]:
        if self.store.portfolio_id is None:
            self.save()
        portfolio = self.client.publish_portfolio(self.store.portfolio_id, site_name)
        self._bind(portfolio)
        return portfolio

    def close(self) -> None:
        self.store.clear_editor()
        self.theme = None
        self.last_updated_at = None
