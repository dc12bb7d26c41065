from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from beautify.exceptions import CatalogFetchError

from .models import Product


class CatalogClient:
    def __init__(
        self,
        products_url: str,
        *,
        session: requests.Session | None = None,
        timeout_sec: float | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self.products_url = products_url
        self.session = session or requests.Session()
        self.timeout_sec = timeout_sec
        self.logger = logger or logging.getLogger(__name__)

    def fetch_products(self) -> list[Product]:
        """Single GET against the catalog endpoint; no retry, no partial result."""
        self.logger.info("Fetching catalog: %s", self.products_url)
        try:
            response = self.session.get(self.products_url, timeout=self.timeout_sec)
        except requests.RequestException as exc:
            self.logger.warning("Catalog request failed: %s", exc)
            raise CatalogFetchError(
                f"Failed to load products: {exc.__class__.__name__}: {exc}",
                url=self.products_url,
            ) from exc

        if response.status_code != 200:
            self.logger.warning("Catalog responded with HTTP %s", response.status_code)
            raise CatalogFetchError(
                f"Failed to load products: HTTP {response.status_code}",
                url=self.products_url,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogFetchError(
                "Failed to load products: response body is not JSON",
                url=self.products_url,
                status_code=response.status_code,
            ) from exc

        products_raw = payload.get("products") if isinstance(payload, Mapping) else None
        if not isinstance(products_raw, list):
            raise CatalogFetchError(
                "Failed to load products: `products` list is missing",
                url=self.products_url,
                status_code=response.status_code,
            )

        products: list[Product] = []
        for index, item in enumerate(products_raw):
            if not isinstance(item, Mapping):
                raise CatalogFetchError(
                    f"Failed to load products: element {index} is not an object",
                    url=self.products_url,
                    status_code=response.status_code,
                )
            products.append(Product.from_dict(item))

        self.logger.info("Catalog loaded: %s products", len(products))
        return products
