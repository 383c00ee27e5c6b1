import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from productdash.catalog.service import CatalogService
from productdash.integrations.contracts.products import ErrorResponse, ProductMutationResponse
from productdash.integrations.policy.errors import ConfigurationError, MalformedRequest

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_catalog_service(request: Request) -> CatalogService:
    store = request.app.state.store
    if store is None:
        raise ConfigurationError()
    return CatalogService(store)


async def _read_product_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise MalformedRequest(details=str(e)) from e
    if not isinstance(data, dict):
        raise MalformedRequest("Request body must be a JSON object", details=type(data).__name__)
    return data


def _require_id(product_id: Optional[str]) -> str:
    if not product_id or not product_id.strip():
        raise MalformedRequest("ID produk diperlukan sebagai query parameter")
    return product_id


@router.options("/products")
async def products_preflight():
    return Response(status_code=200)


@router.get("/products", responses=_ERROR_RESPONSES)
async def list_products(request: Request, service: CatalogService = Depends(get_catalog_service)) -> List[Dict[str, Any]]:
    return await service.list_products(request.headers.get("host"))


@router.post("/products", status_code=201, response_model=ProductMutationResponse, responses=_ERROR_RESPONSES)
async def create_product(request: Request, service: CatalogService = Depends(get_catalog_service)):
    payload = await _read_product_body(request)
    product = await service.create_product(payload, request.headers.get("host"))
    return ProductMutationResponse(message="Produk berhasil ditambahkan", product=product)


@router.put("/products", response_model=ProductMutationResponse, responses=_ERROR_RESPONSES)
async def update_product(
    request: Request,
    product_id: Optional[str] = Query(default=None, alias="id"),
    service: CatalogService = Depends(get_catalog_service),
):
    product_id = _require_id(product_id)
    payload = await _read_product_body(request)
    product = await service.update_product(product_id, payload)
    return ProductMutationResponse(message="Produk berhasil diperbarui", product=product)


@router.delete("/products", response_model=ProductMutationResponse, responses=_ERROR_RESPONSES)
async def delete_product(
    product_id: Optional[str] = Query(default=None, alias="id"),
    service: CatalogService = Depends(get_catalog_service),
):
    product_id = _require_id(product_id)
    product = await service.delete_product(product_id)
    return ProductMutationResponse(message="Produk berhasil dihapus", product=product)
