import logging
import re

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...models.product import ErrorResponse, ProductDetailResponse, ProductListResponse
from ...services.product_store import ProductNotFoundError, ProductStore

logger = logging.getLogger(__name__)

router = APIRouter()

# Leading integer only: "2.0" and "2abc" both read as 2
LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    match = LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


@router.get(
    "",
    response_model=ProductListResponse,
    response_model_exclude_unset=True,
    responses={500: {"model": ErrorResponse}},
)
async def get_products(limit: str | None = None, store: ProductStore = Depends(get_product_store)):
    """List products, optionally only the first ``limit`` of them."""
    try:
        await store.initialize()
        products = store.list(_parse_int(limit))
        return ProductListResponse(products=products)
    except Exception as e:
        logger.exception("Failed to list products")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get(
    "/{pid}",
    response_model=ProductDetailResponse,
    response_model_exclude_unset=True,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_product(pid: str, store: ProductStore = Depends(get_product_store)):
    """Get a specific product by ID"""
    try:
        await store.initialize()
        product_id = _parse_int(pid)
        if product_id is None:
            raise ProductNotFoundError(pid)
        return ProductDetailResponse(product=store.get_by_id(product_id))
    except ProductNotFoundError as e:
        return JSONResponse(status_code=404, content={"error": str(e)})
    except Exception as e:
        logger.exception("Failed to get product %s", pid)
        return JSONResponse(status_code=500, content={"error": str(e)})
