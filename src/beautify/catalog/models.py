"""
Catalog records decoded from the dummyjson `products` payload.

Decoding is lenient: a missing, null or mistyped field never raises, it is
replaced by the default declared on the dataclass.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dt_parser


def _as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _as_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return default
    if isinstance(value, float):
        return value if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return default
        return parsed if math.isfinite(parsed) else default
    return default


def _as_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return default
        return int(parsed) if math.isfinite(parsed) else default
    return default


def _as_datetime(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = dt_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_str_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


@dataclass(frozen=True, slots=True)
class ProductDimensions:
    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    @classmethod
    def from_dict(cls, payload: Any) -> ProductDimensions:
        data = _as_mapping(payload)
        return cls(
            width=_as_float(data.get("width")),
            height=_as_float(data.get("height")),
            depth=_as_float(data.get("depth")),
        )


@dataclass(frozen=True, slots=True)
class ProductReview:
    rating: int = 0
    comment: str = ""
    reviewer_name: str = ""
    reviewer_email: str = ""
    date: datetime | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> ProductReview:
        data = _as_mapping(payload)
        return cls(
            rating=_as_int(data.get("rating")),
            comment=_as_str(data.get("comment")),
            reviewer_name=_as_str(data.get("reviewerName")),
            reviewer_email=_as_str(data.get("reviewerEmail")),
            date=_as_datetime(data.get("date")),
        )


@dataclass(frozen=True, slots=True)
class ProductMeta:
    created_at: datetime | None = None
    updated_at: datetime | None = None
    barcode: str = ""
    qr_code: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> ProductMeta:
        data = _as_mapping(payload)
        return cls(
            created_at=_as_datetime(data.get("createdAt")),
            updated_at=_as_datetime(data.get("updatedAt")),
            barcode=_as_str(data.get("barcode")),
            qr_code=_as_str(data.get("qrCode")),
        )


@dataclass(frozen=True, slots=True)
class Product:
    id: int = 0
    title: str = ""
    description: str = ""
    category: str = ""
    price: float = 0.0
    discount_percentage: float = 0.0
    rating: float = 0.0
    stock: int = 0
    tags: tuple[str, ...] = ()
    brand: str = ""
    sku: str = ""
    weight: float = 0.0
    dimensions: ProductDimensions = field(default_factory=ProductDimensions)
    warranty_information: str = ""
    shipping_information: str = ""
    availability_status: str = ""
    reviews: tuple[ProductReview, ...] = ()
    return_policy: str = ""
    minimum_order_quantity: int = 1
    meta: ProductMeta = field(default_factory=ProductMeta)
    images: tuple[str, ...] = ()
    thumbnail: str = ""

    @property
    def discounted_price(self) -> float:
        return self.price * (1 - self.discount_percentage / 100)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Product:
        reviews_raw = payload.get("reviews")
        reviews = tuple(
            ProductReview.from_dict(item)
            for item in (reviews_raw if isinstance(reviews_raw, list) else [])
            if isinstance(item, Mapping)
        )
        return cls(
            id=_as_int(payload.get("id")),
            title=_as_str(payload.get("title")),
            description=_as_str(payload.get("description")),
            category=_as_str(payload.get("category")),
            price=_as_float(payload.get("price")),
            discount_percentage=_as_float(payload.get("discountPercentage")),
            rating=_as_float(payload.get("rating")),
            stock=_as_int(payload.get("stock")),
            tags=_as_str_tuple(payload.get("tags")),
            brand=_as_str(payload.get("brand")),
            sku=_as_str(payload.get("sku")),
            weight=_as_float(payload.get("weight")),
            dimensions=ProductDimensions.from_dict(payload.get("dimensions")),
            warranty_information=_as_str(payload.get("warrantyInformation")),
            shipping_information=_as_str(payload.get("shippingInformation")),
            availability_status=_as_str(payload.get("availabilityStatus")),
            reviews=reviews,
            return_policy=_as_str(payload.get("returnPolicy")),
            minimum_order_quantity=_as_int(payload.get("minimumOrderQuantity"), default=1),
            meta=ProductMeta.from_dict(payload.get("meta")),
            images=_as_str_tuple(payload.get("images")),
            thumbnail=_as_str(payload.get("thumbnail")),
        )
