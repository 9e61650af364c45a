import httpx
import time
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar
from urllib.parse import quote, quote_plus
from pydantic import BaseModel, ConfigDict, ValidationError
from storefront_scraper.core.config import settings
from storefront_scraper.core.exceptions import (
    PaginationLimitError,
    StorefrontDecodeError,
    StorefrontError,
    StorefrontStatusError,
    StorefrontTransportError,
)
from storefront_scraper.models.shopify import Collection, Product
from storefront_scraper.utils.helpers import normalize_domain
import logging

logger = logging.getLogger(__name__)

# Largest page the storefront listing endpoints will serve
MAX_PAGE_SIZE = 250

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.114 Safari/537.36"
)

RecordT = TypeVar("RecordT", bound=BaseModel)


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    page_size: int = MAX_PAGE_SIZE
    page_delay: float = 0.1
    max_pages: Optional[int] = None
    transport: Optional[httpx.BaseTransport] = None


ClientOption = Callable[[ClientConfig], ClientConfig]


def with_timeout(timeout: float) -> ClientOption:
    """Per-request timeout in seconds."""
    def _apply(config: ClientConfig) -> ClientConfig:
        return config.model_copy(update={"timeout": timeout})
    return _apply


def with_user_agent(user_agent: str) -> ClientOption:
    def _apply(config: ClientConfig) -> ClientConfig:
        return config.model_copy(update={"user_agent": user_agent})
    return _apply


def with_page_size(size: int) -> ClientOption:
    """Records per listing page, clamped to MAX_PAGE_SIZE."""
    def _apply(config: ClientConfig) -> ClientConfig:
        return config.model_copy(update={"page_size": min(max(1, size), MAX_PAGE_SIZE)})
    return _apply


def with_page_delay(delay: float) -> ClientOption:
    """Pause between listing pages, in seconds."""
    def _apply(config: ClientConfig) -> ClientConfig:
        return config.model_copy(update={"page_delay": max(0.0, delay)})
    return _apply


def with_max_pages(max_pages: Optional[int]) -> ClientOption:
    """Fail a listing that still returns records after this many pages (at least 1). None disables the ceiling."""
    ceiling = None if max_pages is None else max(1, max_pages)

    def _apply(config: ClientConfig) -> ClientConfig:
        return config.model_copy(update={"max_pages": ceiling})
    return _apply


def with_transport(transport: httpx.BaseTransport) -> ClientOption:
    def _apply(config: ClientConfig) -> ClientConfig:
        return config.model_copy(update={"transport": transport})
    return _apply


class ShopifyCatalogClient:
    """Reads catalog data from a Shopify storefront's public JSON endpoints.

    Every operation opens its own HTTP client, so one instance can be shared
    between threads. Failures raise a StorefrontError subclass and never
    return partial results.
    """

    def __init__(self, *options: ClientOption):
        config = ClientConfig()
        for option in options:
            config = option(config)
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _headers(self, referer: str) -> Dict[str, str]:
        return {
            'User-Agent': self._config.user_agent,
            'Accept': 'application/json',
            'Accept-Language': 'en-US,en;q=0.9',
            'Referer': referer,
            'Sec-Fetch-Dest': 'empty',
            'Sec-Fetch-Mode': 'cors',
            'Sec-Fetch-Site': 'same-origin',
        }

    def _http_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._config.timeout,
            transport=self._config.transport,
            follow_redirects=True,
        )

    def _get_json(self, client: httpx.Client, url: str, referer: str,
                  params: Optional[Dict[str, Any]] = None) -> Tuple[Dict[str, Any], httpx.Response]:
        """GET a storefront JSON view and return (payload, response)."""
        try:
            response = client.get(url, params=params, headers=self._headers(referer))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise StorefrontTransportError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Storefront request non-2xx: {response.status_code} - {response.url}")
            raise StorefrontStatusError(str(response.url), response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise self._decode_error(response, f"invalid JSON: {str(e)}") from e
        if not isinstance(data, dict):
            raise self._decode_error(response, f"expected a JSON object, got {type(data).__name__}")
        return data, response

    def _decode_error(self, response: httpx.Response, message: str) -> StorefrontDecodeError:
        logger.error(f"Could not decode response from {response.url}: {message}")
        return StorefrontDecodeError(str(response.url), message, response.text)

    def _decode_records(self, response: httpx.Response, items: Any, model: Type[RecordT]) -> List[RecordT]:
        if items is None:
            return []
        if not isinstance(items, list):
            raise self._decode_error(response, f"expected a list of {model.__name__} records")
        try:
            return [model.model_validate(item) for item in items]
        except ValidationError as e:
            raise self._decode_error(response, str(e)) from e

    def _paginate_products(self, url: str, referer: str) -> List[Product]:
        all_products: List[Product] = []
        page = 1
        max_pages = self._config.max_pages
        with self._http_client() as client:
            while True:
                params = {"limit": self._config.page_size, "page": page}
                data, response = self._get_json(client, url, referer, params=params)
                products = self._decode_records(response, data.get("products"), Product)
                logger.debug(f"Fetched page {page} of {url}: {len(products)} products")
                if not products:
                    break
                if max_pages is not None and page > max_pages:
                    raise PaginationLimitError(url, max_pages)
                all_products.extend(products)
                page += 1
                if self._config.page_delay:
                    time.sleep(self._config.page_delay)
        return all_products

    def get_products(self, domain: str) -> List[Product]:
        """Fetch every product of a store, page by page."""
        domain = normalize_domain(domain)
        products = self._paginate_products(
            f"https://{domain}/products.json",
            f"https://{domain}/",
        )
        logger.info(f"Fetched {len(products)} products from {domain}")
        return products

    def get_product(self, domain: str, handle: str) -> Product:
        """Fetch a single product by handle."""
        domain = normalize_domain(domain)
        path = f"products/{quote(handle, safe='')}"
        url = f"https://{domain}/{path}.json"
        with self._http_client() as client:
            data, response = self._get_json(client, url, f"https://{domain}/{path}")
        node = data.get("product")
        if not isinstance(node, dict):
            raise self._decode_error(response, "missing product object")
        try:
            return Product.model_validate(node)
        except ValidationError as e:
            raise self._decode_error(response, str(e)) from e

    def get_collections(self, domain: str) -> List[Collection]:
        domain = normalize_domain(domain)
        url = f"https://{domain}/collections.json"
        with self._http_client() as client:
            data, response = self._get_json(client, url, f"https://{domain}/")
        collections = self._decode_records(response, data.get("collections"), Collection)
        logger.info(f"Fetched {len(collections)} collections from {domain}")
        return collections

    def get_collection_products(self, domain: str, collection_handle: str) -> List[Product]:
        """Fetch every product in a collection, page by page."""
        domain = normalize_domain(domain)
        path = f"collections/{quote(collection_handle, safe='')}"
        products = self._paginate_products(
            f"https://{domain}/{path}/products.json",
            f"https://{domain}/{path}",
        )
        logger.info(f"Fetched {len(products)} products from collection {collection_handle} on {domain}")
        return products

    def search_products(self, domain: str, query: str) -> List[Product]:
        """Search products through the storefront's predictive search endpoint.
        Products are read from resources.results.products; a missing path yields [].
        """
        domain = normalize_domain(domain)
        url = f"https://{domain}/search/suggest.json"
        params = {"q": query, "resources[type]": "product"}
        referer = f"https://{domain}/search?q={quote_plus(query)}"
        with self._http_client() as client:
            data, response = self._get_json(client, url, referer, params=params)

        node: Any = data
        for key in ("resources", "results"):
            node = node.get(key)
            if node is None:
                return []
            if not isinstance(node, dict):
                raise self._decode_error(response, f"unexpected shape at {key}")
        return self._decode_records(response, node.get("products"), Product)

    def test_connection(self, domain: str) -> bool:
        """Check that a store answers its collections endpoint"""
        try:
            self.get_collections(domain)
            return True
        except StorefrontError as e:
            logger.error(f"Storefront connection test failed for {domain}: {e.message}")
            return False


def build_client_from_settings() -> ShopifyCatalogClient:
    """Shared client configured from application settings"""
    options = [
        with_timeout(settings.request_timeout),
        with_page_size(settings.page_size),
        with_page_delay(settings.page_delay),
        with_max_pages(settings.max_pages),
    ]
    if settings.user_agent:
        options.append(with_user_agent(settings.user_agent))
    return ShopifyCatalogClient(*options)


catalog_client = build_client_from_settings()
