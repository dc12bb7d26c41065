from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://dummyjson.com"


@dataclass(slots=True)
class Settings:
    root_dir: Path
    logs_dir: Path
    exports_dir: Path
    api_base_url: str = DEFAULT_API_BASE_URL
    http_timeout_sec: float | None = None
    add_to_cart_delay_sec: float = 0.8
    checkout_delay_sec: float = 2.0
    free_shipping_threshold: float = 50.0
    shipping_fee: float = 5.99
    log_level: str = "INFO"

    @property
    def products_url(self) -> str:
        return f"{self.api_base_url}/products"

    @classmethod
    def load(cls, base_dir: Path | None = None) -> Settings:
        load_dotenv(override=False)

        root_env = os.getenv("BEAUTIFY_HOME")
        root_dir = Path(root_env).expanduser().resolve() if root_env else (base_dir or Path.cwd()).resolve()

        logs_dir = Path(os.getenv("BEAUTIFY_LOG_DIR", root_dir / "logs")).expanduser().resolve()
        exports_dir = Path(os.getenv("BEAUTIFY_EXPORT_DIR", root_dir / "exports")).expanduser().resolve()

        api_base_url = os.getenv("BEAUTIFY_API_BASE_URL", DEFAULT_API_BASE_URL).strip().rstrip("/")

        timeout_raw = os.getenv("BEAUTIFY_HTTP_TIMEOUT_SEC")
        http_timeout_sec = float(timeout_raw) if timeout_raw else None

        add_to_cart_delay_sec = float(os.getenv("BEAUTIFY_ADD_TO_CART_DELAY_SEC", "0.8"))
        checkout_delay_sec = float(os.getenv("BEAUTIFY_CHECKOUT_DELAY_SEC", "2"))
        free_shipping_threshold = float(os.getenv("BEAUTIFY_FREE_SHIPPING_THRESHOLD", "50"))
        shipping_fee = float(os.getenv("BEAUTIFY_SHIPPING_FEE", "5.99"))
        log_level = os.getenv("BEAUTIFY_LOG_LEVEL", "INFO").strip().upper() or "INFO"

        return cls(
            root_dir=root_dir,
            logs_dir=logs_dir,
            exports_dir=exports_dir,
            api_base_url=api_base_url or DEFAULT_API_BASE_URL,
            http_timeout_sec=http_timeout_sec,
            add_to_cart_delay_sec=add_to_cart_delay_sec,
            checkout_delay_sec=checkout_delay_sec,
            free_shipping_threshold=free_shipping_threshold,
            shipping_fee=shipping_fee,
            log_level=log_level,
        )

    def ensure_directories(self) -> None:
        for path in [self.root_dir, self.logs_dir, self.exports_dir]:
            path.mkdir(parents=True, exist_ok=True)
