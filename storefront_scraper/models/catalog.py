from pydantic import BaseModel
from typing import List, Dict, Any

from storefront_scraper.models.shopify import Collection, Product


class CatalogResponse(BaseModel):
    status: str = "success"
    domain: str
    count: int
    execution_time: float


class ProductsResponse(CatalogResponse):
    products: List[Product] = []


class CollectionsResponse(CatalogResponse):
    collections: List[Collection] = []


class ProductResponse(BaseModel):
    status: str = "success"
    domain: str
    execution_time: float
    product: Product


class ErrorResponse(BaseModel):
    status: str = "error"
    error_code: str
    message: str
    details: Dict[str, Any] = {}
