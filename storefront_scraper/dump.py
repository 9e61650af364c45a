#!/usr/bin/env python3
"""
Dump the catalog of a Shopify storefront to stdout.

    storefront-dump allbirds.com
    storefront-dump allbirds.com --handle mens-wool-runners --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from storefront_scraper.core.config import settings
from storefront_scraper.core.exceptions import StorefrontError
from storefront_scraper.models.shopify import Product
from storefront_scraper.services.catalog_service import (
    ShopifyCatalogClient,
    with_page_size,
    with_timeout,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storefront-dump",
        description="Fetch products from a Shopify storefront's public JSON endpoints",
    )
    parser.add_argument("domain", help="store domain, e.g. example.com")
    parser.add_argument("--handle", help="fetch a single product by handle")
    parser.add_argument("--json", action="store_true", dest="as_json", help="print JSON instead of a summary")
    parser.add_argument("--timeout", type=float, default=settings.request_timeout, help="per-request timeout in seconds")
    parser.add_argument("--page-size", type=int, default=settings.page_size, help="products per listing page (max 250)")
    return parser


def format_product(product: Product) -> str:
    lines = [
        f"Product: {product.title}",
        f"Handle: {product.handle}",
        f"Vendor: {product.vendor or ''}",
        f"Type: {product.product_type or ''}",
    ]
    if product.variants:
        variant = product.variants[0]
        lines.append(f"Price: {variant.price or ''}")
        if variant.compare_at_price:
            lines.append(f"Compare at price: {variant.compare_at_price}")
        lines.append(f"SKU: {variant.sku or ''}")
        if variant.inventory_quantity is not None:
            lines.append(f"Inventory: {variant.inventory_quantity}")
    if product.images:
        lines.append(f"First image URL: {product.images[0].src}")
    if product.options:
        lines.append("Options:")
        for option in product.options:
            lines.append(f"  - {option.name}: {', '.join(option.values)}")
    lines.append(f"Tags: {', '.join(product.tags)}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None, client: Optional[ShopifyCatalogClient] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    client = client or ShopifyCatalogClient(with_timeout(args.timeout), with_page_size(args.page_size))

    try:
        if args.handle:
            products = [client.get_product(args.domain, args.handle)]
        else:
            products = client.get_products(args.domain)
    except StorefrontError as e:
        logger.error(f"Failed to fetch catalog of {args.domain}: {e.message}")
        return 1

    if args.as_json:
        payload = [p.model_dump(mode="json") for p in products]
        print(json.dumps(payload[0] if args.handle else payload, indent=2))
        return 0

    if not args.handle:
        print(f"Found {len(products)} products")
    for product in products:
        print()
        print(format_product(product))
        print("-" * 40)
    return 0


if __name__ == "__main__":
    sys.exit(main())
