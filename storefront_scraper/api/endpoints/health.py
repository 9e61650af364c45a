from fastapi import APIRouter, Depends, Query
from storefront_scraper.core.config import settings
from storefront_scraper.services.catalog_service import ShopifyCatalogClient
from storefront_scraper.api.deps import get_catalog_client

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "storefront-scraper",
        "version": settings.version
    }


@router.get("/test-connection")
def test_connection(
    domain: str = Query(..., description="Store domain, e.g. 'example.com' or 'https://www.example.com'"),
    catalog_client: ShopifyCatalogClient = Depends(get_catalog_client)
):
    """Check that a storefront answers its public JSON endpoints"""
    is_connected = catalog_client.test_connection(domain)
    return {
        "domain": domain,
        "storefront": "connected" if is_connected else "failed"
    }
