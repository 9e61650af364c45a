"""Exceptions raised by the storefront catalog client."""

from typing import Optional, Dict, Any


BODY_EXCERPT_LENGTH = 500


def body_excerpt(body: Optional[str], length: int = BODY_EXCERPT_LENGTH) -> str:
    """Trim a response body to something that fits in an error message."""
    if not body:
        return ""
    if len(body) <= length:
        return body
    return body[:length] + "..."


class StorefrontError(Exception):
    """Base exception for all storefront client errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class StorefrontTransportError(StorefrontError):
    """Raised when the request never produced a response (DNS, connect, timeout)."""

    def __init__(self, url: str, message: str):
        super().__init__(
            message=f"Request to {url} failed: {message}",
            error_code="TRANSPORT_ERROR",
            details={"url": url}
        )
        self.url = url


class StorefrontStatusError(StorefrontError):
    """Raised when the storefront answers with a non-2xx status."""

    def __init__(self, url: str, status_code: int, body: Optional[str] = None):
        excerpt = body_excerpt(body)
        super().__init__(
            message=f"Unexpected status code {status_code} from {url}: {excerpt}",
            error_code="UNEXPECTED_STATUS",
            details={"url": url, "status_code": status_code, "body": excerpt}
        )
        self.url = url
        self.status_code = status_code
        self.body = body


class StorefrontDecodeError(StorefrontError):
    """Raised when a response body is not the JSON shape we expect."""

    def __init__(self, url: str, message: str, body: Optional[str] = None):
        excerpt = body_excerpt(body)
        super().__init__(
            message=f"Could not decode response from {url}: {message}",
            error_code="DECODE_ERROR",
            details={"url": url, "body": excerpt}
        )
        self.url = url
        self.body = body


class PaginationLimitError(StorefrontError):
    """Raised when a paginated listing is still returning records at the page ceiling."""

    def __init__(self, url: str, max_pages: int):
        super().__init__(
            message=f"Stopped after {max_pages} pages from {url} without reaching an empty page",
            error_code="PAGINATION_LIMIT",
            details={"url": url, "max_pages": max_pages}
        )
        self.url = url
        self.max_pages = max_pages
