"""
FastAPI application - Main entry point

    uvicorn productdash.api.main:app --host 127.0.0.1 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from productdash.api.products_router import router as products_router
from productdash.error_handler import ErrorHandler
from productdash.integrations.clients.mocks import MemoryCatalogStore
from productdash.integrations.clients.real_http import GitHubContentsClient
from productdash.integrations.contracts.interfaces import CatalogStore
from productdash.integrations.policy.errors import CatalogError, MethodNotAllowed
from productdash.utils.config_loader import StoreConfig, load_store_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

error_handler = ErrorHandler()


def select_store(config: StoreConfig) -> Optional[CatalogStore]:
    """Pick the catalog store for this process; None means the GitHub token is missing."""
    if config.mode == "memory":
        logger.warning("INTEGRATIONS_MODE=mock: catalog is kept in memory and lost on restart")
        return MemoryCatalogStore()
    if not config.token:
        logger.warning("GITHUB_TOKEN is not set; catalog requests will fail until it is configured")
        return None
    return GitHubContentsClient(config)


def _error_response(status_code: int, payload: dict, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=payload, headers={**CORS_HEADERS, **(headers or {})})


def create_app(config: Optional[StoreConfig] = None, store: Optional[CatalogStore] = None) -> FastAPI:
    if config is None:
        config = load_store_config()
    if store is None:
        store = select_store(config)

    app = FastAPI(
        title="ProductDash Catalog API",
        description="Product catalog persisted as a JSON file in a GitHub repository",
        version="1.0.0",
    )
    app.state.config = config
    app.state.store = store

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        status_code, payload = error_handler.handle_exception(
            exc, context={"method": request.method, "path": request.url.path}
        )
        return _error_response(status_code, payload)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            status_code, payload = error_handler.handle_exception(
                MethodNotAllowed(), context={"method": request.method, "path": request.url.path}
            )
            return _error_response(status_code, payload, headers=exc.headers)
        return _error_response(exc.status_code, {"error": str(exc.detail)}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        status_code, payload = error_handler.handle_exception(
            exc, context={"method": request.method, "path": request.url.path}
        )
        return _error_response(status_code, payload)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(products_router, prefix="/api", tags=["Products"])

    logger.info("Catalog API ready: %r store=%s", config, type(store).__name__ if store else None)
    return app


app = create_app()
