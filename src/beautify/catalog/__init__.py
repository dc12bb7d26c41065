from .client import CatalogClient
from .models import Product, ProductDimensions, ProductMeta, ProductReview

__all__ = [
    "CatalogClient",
    "Product",
    "ProductDimensions",
    "ProductMeta",
    "ProductReview",
]
