"""
Orders REST client
Handles HTTP communication with the orders/products backend.
"""
from __future__ import annotations

from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from furni_orders import config
from furni_orders.models import CatalogProduct, Order


class ApiError(RuntimeError):
    """Raised when the backend cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _err(resp: requests.Response) -> str:
    try:
        j = resp.json()
        if isinstance(j, dict) and "detail" in j:
            return str(j["detail"])
        return str(j)
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"


class OrdersApiClient:
    """HTTP client for the orders and products endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout or config.API_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_json(self, path: str) -> Any:
        try:
            r = self.session.get(self._url(path), timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise ApiError(f"Cannot reach {self.base_url}: {exc}") from exc
        if r.status_code >= 400:
            raise ApiError(_err(r), status_code=r.status_code)
        try:
            return r.json()
        except ValueError as exc:
            raise ApiError(f"Invalid JSON from {path}") from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """GET a single order with its items."""
        data = self._get_json(f"/api/orders/{order_id}")
        try:
            return Order.model_validate(data)
        except ValidationError as exc:
            raise ApiError(f"Malformed order {order_id}: {exc}") from exc

    def get_products(self) -> List[CatalogProduct]:
        """GET the full product catalog."""
        data = self._get_json("/api/products")
        if not isinstance(data, list):
            raise ApiError("Product catalog response is not a list")
        try:
            return [CatalogProduct.model_validate(p) for p in data]
        except ValidationError as exc:
            raise ApiError(f"Malformed product catalog: {exc}") from exc

    def export_pdf_url(self, order_id: str) -> str:
        """URL of the server-side PDF export for an order (no request made)."""
        return self._url(f"/api/orders/{order_id}/export-pdf")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OrdersApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
