"""HTTP client for the portfolio REST API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409


class PortfolioClient:
    """
    Thin wrapper over the /api endpoints.

    Requests are sent once; failures surface as ApiError and are never
    retried here.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        timeout: float = 10.0,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = token
        self._client = httpx.Client(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PortfolioClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if extra:
            headers.update(extra)
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        response = self._client.request(
            method, path, json=json, headers=self._headers(headers)
        )

        if response.is_error:
            try:
                message = response.json().get("message") or response.reason_phrase
            except ValueError:
                message = response.reason_phrase
            logger.warning("api_error %s %s -> %d %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)

        return response.json()

    # ------------------------
    # Auth
    # ------------------------

    def register(self, email: str, password: str, first_name: str = "", last_name: str = "") -> Dict[str, Any]:
        data = self._request(
            "POST",
            "/api/register",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
            },
        )
        self.token = data.get("accessToken")
        return data["user"]

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/api/login", json={"email": email, "password": password})
        self.token = data.get("accessToken")
        return data["user"]

    def logout(self) -> None:
        self._request("GET", "/api/logout")
        self.token = None

    def current_user(self) -> Dict[str, Any]:
        return self._request("GET", "/api/auth/user")

    # ------------------------
    # Portfolios
    # ------------------------

    def list_portfolios(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/portfolios")

    def get_portfolio(self, portfolio_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/portfolios/{portfolio_id}")

    def create_portfolio(self, name: str, layout: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/portfolios", json={"name": name, "layout": layout})

    def update_portfolio(
        self,
        portfolio_id: int,
        *,
        name: Optional[str] = None,
        layout: Optional[Dict[str, Any]] = None,
        unmodified_since: Optional[str] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if layout is not None:
            body["layout"] = layout

        headers = {"If-Unmodified-Since": unmodified_since} if unmodified_since else None
        return self._request("PUT", f"/api/portfolios/{portfolio_id}", json=body, headers=headers)

    def delete_portfolio(self, portfolio_id: int) -> None:
        self._request("DELETE", f"/api/portfolios/{portfolio_id}")

    def publish_portfolio(self, portfolio_id: int, site_name: str) -> Dict[str, Any]:
        return self._request(
            "POST", f"/api/portfolios/{portfolio_id}/publish", json={"siteName": site_name}
        )
