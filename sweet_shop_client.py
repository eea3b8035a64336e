"""Sweet Shop API client.

A thin wrapper around the REST API using ``requests``.  It performs the
same calls as the browser frontend: registering and logging in,
listing and searching sweets, buying them, and the administrator's
create/update/delete/restock actions.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` (or an empty
list for listings) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  A 401 answer clears the stored token,
which is how the frontend logs a user out when the session expires.

Example::

    api = SweetShopAPI(base_url="http://localhost:3000/api")
    api.login("alice", "secret")
    sweets, error = api.search_sweets(category="Chocolate", max_price=5)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SweetShopAPI:
    """Client for the Sweet Shop API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix,
                e.g. ``http://localhost:3000/api``.
            token: Optional access token from a previous login.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.user: Optional[Dict[str, Any]] = None
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/sweets``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            if status == 401 and self.token:
                logger.info("Session rejected by the API, clearing token")
                self.logout()
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an account.  Returns the public user record."""
        data, error = self._request(
            "POST", "/auth/register", json_body={"username": username, "password": password}
        )
        if error:
            return None, error
        return data.get("user"), None

    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in and keep the returned token for later requests."""
        data, error = self._request(
            "POST", "/auth/login", json_body={"username": username, "password": password}
        )
        if error:
            return None, error
        self.token = data["token"]
        self.user = data.get("user")
        return self.user, None

    def logout(self) -> None:
        self.token = None
        self.user = None

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get("role") == "Admin"

    # ------------------------------------------------------------------
    # Catalogue
    # ------------------------------------------------------------------
    def list_sweets(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/sweets")
        if error:
            return [], error
        return data or [], None

    def search_sweets(
        self,
        *,
        name: Optional[str] = None,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search the catalogue.  Filters left as ``None`` are not sent."""
        params = {
            "name": name,
            "category": category,
            "minPrice": min_price,
            "maxPrice": max_price,
        }
        params = {key: value for key, value in params.items() if value is not None}
        data, error = self._request("GET", "/sweets/search", params=params)
        if error:
            return [], error
        return data or [], None

    def get_sweet(self, sweet_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/sweets/{sweet_id}")

    # ------------------------------------------------------------------
    # Administration
    # ------------------------------------------------------------------
    def create_sweet(
        self, name: str, category: str, price: float, quantity: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        body = {"name": name, "category": category, "price": price, "quantity": quantity}
        return self._request("POST", "/sweets", json_body=body)

    def update_sweet(self, sweet_id: str, **changes: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the given fields (``name``, ``category``, ``price``, ``quantity``)."""
        return self._request("PUT", f"/sweets/{sweet_id}", json_body=changes)

    def delete_sweet(self, sweet_id: str) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("DELETE", f"/sweets/{sweet_id}")
        if error:
            return False, error
        return bool(data and data.get("success")), None

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------
    def purchase(self, sweet_id: str, quantity: int = 1) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/sweets/{sweet_id}/purchase", json_body={"quantity": quantity})

    def restock(self, sweet_id: str, quantity: int = 1) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/sweets/{sweet_id}/restock", json_body={"quantity": quantity})
