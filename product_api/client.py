"""Product API client.

This module defines a simple client wrapper around the Product API
REST endpoints.  The client uses the ``requests`` library internally
and exposes one method per operation:

* :meth:`ProductAPI.list_products` – return every product.
* :meth:`ProductAPI.get_product` – fetch a single product by identifier.
* :meth:`ProductAPI.add_product` – create a product.
* :meth:`ProductAPI.update_product` – replace a product.
* :meth:`ProductAPI.delete_product` – delete a product.

Methods never raise for HTTP or connection failures.  Each returns a
tuple ``(data, error)`` where ``error`` is ``None`` on success and a
dictionary with ``status_code`` and ``message`` keys otherwise.
Payloads use the service's wire names, including ``descripton``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ProductAPI:
    """Client for interacting with the Product API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:9090``.
            prefix: Path prefix of the versioned API.  Use ``""`` for the
                unversioned routes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API root (e.g. ``/products/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
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
                except ValueError:
                    message = exc.response.text
                else:
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    if isinstance(detail, dict):
                        message = detail.get("message") or str(detail)
                    else:
                        message = detail or str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all products.

        Returns:
            A tuple ``(products, error)``. ``products`` is empty on failure.
        """
        data, error = self._request("GET", "/products/")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_product(self, product_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single product by ID."""
        return self._request("GET", f"/products/{product_id}")

    def add_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a product.

        Args:
            payload: Product fields (``name``, ``descripton``, ``price``,
                ``sku``).  An ``id`` is ignored by the server.
        Returns:
            A tuple ``(product, error)`` where ``product`` carries the
            assigned ``id``.
        """
        return self._request("POST", "/products/", json_body=payload)

    def update_product(
        self, product_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the product with ``product_id`` by ``payload``."""
        return self._request("PUT", f"/products/{product_id}", json_body=payload)

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a product.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/products/{product_id}")
        if error:
            return False, error
        return True, None
