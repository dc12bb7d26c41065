from __future__ import annotations

import platform
import sys

from beautify.catalog import CatalogClient
from beautify.config import Settings
from beautify.exceptions import CatalogFetchError


def run_doctor_checks(settings: Settings, client: CatalogClient | None = None) -> list[dict[str, str]]:
    checks: list[dict[str, str]] = []

    checks.append(
        {
            "check": "python_version",
            "status": "ok" if sys.version_info >= (3, 11) else "warn",
            "detail": platform.python_version(),
        }
    )

    checks.append(
        {
            "check": "logs_dir",
            "status": "ok" if settings.logs_dir.exists() else "warn",
            "detail": str(settings.logs_dir),
        }
    )

    client = client or CatalogClient(settings.products_url, timeout_sec=settings.http_timeout_sec or 10)
    try:
        products = client.fetch_products()
        checks.append(
            {
                "check": "catalog_endpoint",
                "status": "ok",
                "detail": f"{settings.products_url} ({len(products)} products)",
            }
        )
    except CatalogFetchError as exc:
        checks.append(
            {
                "check": "catalog_endpoint",
                "status": "warn",
                "detail": str(exc),
            }
        )

    return checks
