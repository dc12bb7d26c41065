from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from beautify.catalog.models import Product


def _product_row(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "title": product.title,
        "brand": product.brand,
        "category": product.category,
        "sku": product.sku,
        "price": product.price,
        "discount_percentage": product.discount_percentage,
        "discounted_price": round(product.discounted_price, 2),
        "rating": product.rating,
        "reviews": len(product.reviews),
        "stock": product.stock,
        "availability_status": product.availability_status,
        "minimum_order_quantity": product.minimum_order_quantity,
        "tags": ", ".join(product.tags),
        "weight": product.weight,
        "width": product.dimensions.width,
        "height": product.dimensions.height,
        "depth": product.dimensions.depth,
        "warranty_information": product.warranty_information,
        "shipping_information": product.shipping_information,
        "return_policy": product.return_policy,
        "barcode": product.meta.barcode,
        "thumbnail": product.thumbnail,
    }


def export_catalog(products: list[Product], formats: list[str], out_dir: Path) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame([_product_row(product) for product in products])

    created_files: list[Path] = []
    if "csv" in formats:
        csv_path = (out_dir / "beautify_catalog.csv").resolve()
        df.to_csv(csv_path, index=False, encoding="utf-8-sig")
        created_files.append(csv_path)

    if "xlsx" in formats:
        xlsx_path = (out_dir / "beautify_catalog.xlsx").resolve()
        with pd.ExcelWriter(xlsx_path, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="products")
        created_files.append(xlsx_path)

    return created_files
