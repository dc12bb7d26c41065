from __future__ import annotations


class BeautifyError(Exception):
    """Base error for the beautify package."""


class CatalogFetchError(BeautifyError):
    """The product catalog could not be fetched or decoded."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class CheckoutError(BeautifyError):
    """The checkout flow was driven out of order or with an empty cart."""
