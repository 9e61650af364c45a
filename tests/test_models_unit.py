from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront_scraper.models.shopify import Collection, Product

from conftest import SAMPLE_COLLECTION, SAMPLE_PRODUCT


def test_product_decodes_nested_records():
    p = Product.model_validate(SAMPLE_PRODUCT)
    assert p.id == 123
    assert p.description == "<p>Soft wool</p>"
    assert p.published_at is not None and p.published_at.year == 2024
    v = p.variants[0]
    assert v.product_id == p.id
    assert v.price == "19.99"
    assert v.price_amount == Decimal("19.99")
    assert v.compare_at_amount == Decimal("24.90")
    assert p.images[0].variant_ids == [456]
    assert p.options[0].name == "Size"
    assert p.options[0].values == ["Small"]


def test_tags_accept_space_delimited_string():
    p = Product.model_validate({"id": 1, "tags": "red blue green"})
    assert p.tags == ["red", "blue", "green"]


def test_tags_accept_list():
    p = Product.model_validate({"id": 1, "tags": ["red", "blue"]})
    assert p.tags == ["red", "blue"]


def test_tags_reject_other_shapes():
    with pytest.raises(ValidationError):
        Product.model_validate({"id": 1, "tags": {"red": True}})


def test_null_collections_become_empty():
    p = Product.model_validate({"id": 1, "tags": None, "variants": None, "images": None, "options": None})
    assert p.tags == [] and p.variants == [] and p.images == [] and p.options == []


def test_price_is_not_parsed_as_float():
    p = Product.model_validate({"id": 1, "variants": [{"id": 2, "price": "0.10", "compare_at_price": None}]})
    assert p.variants[0].price == "0.10"
    assert p.variants[0].compare_at_amount is None


def test_negative_identifier_is_rejected():
    with pytest.raises(ValidationError):
        Product.model_validate({"id": -1})


def test_records_are_immutable():
    p = Product.model_validate(SAMPLE_PRODUCT)
    with pytest.raises(ValidationError):
        p.title = "Changed"


def test_unknown_fields_are_ignored():
    p = Product.model_validate({"id": 1, "template_suffix": "alt", "status": "active"})
    assert not hasattr(p, "template_suffix")


def test_collection_with_image():
    c = Collection.model_validate(SAMPLE_COLLECTION)
    assert c.id == 321
    assert c.image is not None and c.image.product_id is None
    assert Collection.model_validate({"id": 5, "title": "No image"}).image is None
