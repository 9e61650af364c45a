from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront_scraper.core.config import settings
from storefront_scraper.core.exceptions import StorefrontError, StorefrontStatusError
from storefront_scraper.models.catalog import ErrorResponse
from storefront_scraper.api.endpoints import catalog, health
import logging
import time

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Read-only API over the public catalog JSON of Shopify storefronts",
    openapi_url="/api/v1/openapi.json",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"Request: {request.method} {request.url}")
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(f"Response: {response.status_code} - {process_time:.4f}s")
    return response


# Upstream 404 stays 404; every other storefront failure is a bad gateway
@app.exception_handler(StorefrontError)
async def storefront_exception_handler(request: Request, exc: StorefrontError):
    logger.error(f"Storefront error: {exc.message}")
    status_code = 502
    if isinstance(exc, StorefrontStatusError) and exc.status_code == 404:
        status_code = 404
    body = ErrorResponse(error_code=exc.error_code or "STOREFRONT_ERROR", message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "status": "error",
            "message": "Internal server error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred"
        }
    )


app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["health"]
)

app.include_router(
    catalog.router,
    prefix="/api/v1/stores",
    tags=["catalog"]
)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "status": "running",
        "docs_url": "/api/v1/docs",
        "health_check": "/api/v1/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "storefront_scraper.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info"
    )
