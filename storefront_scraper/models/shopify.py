from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from storefront_scraper.utils.helpers import parse_tags


class StorefrontModel(BaseModel):
    """Base for records decoded from storefront JSON. Immutable once validated."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Image(StorefrontModel):
    id: NonNegativeInt
    product_id: Optional[NonNegativeInt] = None
    position: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    src: str = ""
    alt: Optional[str] = None
    variant_ids: List[NonNegativeInt] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("variant_ids", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value


class Variant(StorefrontModel):
    id: NonNegativeInt
    product_id: Optional[NonNegativeInt] = None
    title: str = ""
    # Prices stay as the decimal strings the storefront sends
    price: Optional[str] = None
    compare_at_price: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    position: Optional[int] = None
    fulfillment_service: Optional[str] = None
    inventory_quantity: Optional[int] = None
    inventory_management: Optional[str] = None
    grams: Optional[int] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    taxable: Optional[bool] = None
    requires_shipping: Optional[bool] = None
    available: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def price_amount(self) -> Optional[Decimal]:
        return Decimal(self.price) if self.price else None

    @property
    def compare_at_amount(self) -> Optional[Decimal]:
        return Decimal(self.compare_at_price) if self.compare_at_price else None


class Option(StorefrontModel):
    id: Optional[NonNegativeInt] = None
    product_id: Optional[NonNegativeInt] = None
    name: str
    position: Optional[int] = None
    values: List[str] = Field(default_factory=list)


class Product(StorefrontModel):
    id: NonNegativeInt
    title: str = ""
    handle: str = ""
    description: Optional[str] = Field(None, validation_alias=AliasChoices("body_html", "description"))
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    options: List[Option] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value):
        return parse_tags(value)

    @field_validator("variants", "images", "options", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value


class Collection(StorefrontModel):
    id: NonNegativeInt
    title: str = ""
    handle: str = ""
    description: Optional[str] = Field(None, validation_alias=AliasChoices("body_html", "description"))
    published_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    products_count: Optional[int] = None
    image: Optional[Image] = None
