from fastapi import APIRouter, Depends, Query
from storefront_scraper.services.catalog_service import ShopifyCatalogClient
from storefront_scraper.api.deps import get_catalog_client
from storefront_scraper.models.catalog import CollectionsResponse, ProductResponse, ProductsResponse
from storefront_scraper.utils.helpers import normalize_domain
import time
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

# Sync endpoints: the catalog client blocks.
# StorefrontError is turned into a JSON error response by the app-level handler.


@router.get("/{domain}/products",
            response_model=ProductsResponse,
            summary="All products of a store",
            description="Walks /products.json page by page until an empty page is returned.")
def get_products(
    domain: str,
    catalog_client: ShopifyCatalogClient = Depends(get_catalog_client)
):
    start_time = time.time()
    logger.info(f"Fetching all products from {domain}")
    products = catalog_client.get_products(domain)
    return ProductsResponse(
        domain=normalize_domain(domain),
        count=len(products),
        execution_time=time.time() - start_time,
        products=products
    )


@router.get("/{domain}/products/{handle}",
            response_model=ProductResponse,
            summary="One product by handle")
def get_product(
    domain: str,
    handle: str,
    catalog_client: ShopifyCatalogClient = Depends(get_catalog_client)
):
    start_time = time.time()
    product = catalog_client.get_product(domain, handle)
    return ProductResponse(
        domain=normalize_domain(domain),
        execution_time=time.time() - start_time,
        product=product
    )


@router.get("/{domain}/collections",
            response_model=CollectionsResponse,
            summary="All collections of a store")
def get_collections(
    domain: str,
    catalog_client: ShopifyCatalogClient = Depends(get_catalog_client)
):
    start_time = time.time()
    collections = catalog_client.get_collections(domain)
    return CollectionsResponse(
        domain=normalize_domain(domain),
        count=len(collections),
        execution_time=time.time() - start_time,
        collections=collections
    )


@router.get("/{domain}/collections/{handle}/products",
            response_model=ProductsResponse,
            summary="All products of a collection",
            description="Walks /collections/{handle}/products.json page by page until an empty page is returned.")
def get_collection_products(
    domain: str,
    handle: str,
    catalog_client: ShopifyCatalogClient = Depends(get_catalog_client)
):
    start_time = time.time()
    logger.info(f"Fetching products of collection {handle} from {domain}")
    products = catalog_client.get_collection_products(domain, handle)
    return ProductsResponse(
        domain=normalize_domain(domain),
        count=len(products),
        execution_time=time.time() - start_time,
        products=products
    )


@router.get("/{domain}/search",
            response_model=ProductsResponse,
            summary="Search products")
def search_products(
    domain: str,
    q: str = Query(..., min_length=1, description="Free-text search query"),
    catalog_client: ShopifyCatalogClient = Depends(get_catalog_client)
):
    start_time = time.time()
    products = catalog_client.search_products(domain, q)
    return ProductsResponse(
        domain=normalize_domain(domain),
        count=len(products),
        execution_time=time.time() - start_time,
        products=products
    )
