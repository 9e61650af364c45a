from storefront_scraper.services.catalog_service import ShopifyCatalogClient, catalog_client


def get_catalog_client() -> ShopifyCatalogClient:
    """Dependency for the storefront catalog client"""
    return catalog_client
