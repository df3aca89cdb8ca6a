"""
Products API Routes
"""

import logging
import sqlite3
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from products_api import storage
from products_api.database import get_db
from products_api.errors import INTERNAL_ERROR
from products_api.models import ErrorResponse, Product, ProductPayload, ResultResponse
from products_api.storage import ProductNotFound

router = APIRouter(tags=["products"])
logger = logging.getLogger(__name__)

DEFAULT_COUNT = 10
MAX_COUNT = 10

NOT_FOUND = "Product not found"

# Range of an SQLite INTEGER; anything wider cannot be bound
SQL_INT_MIN = -2**63
SQL_INT_MAX = 2**63 - 1

error_responses = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def store_failure(message: str, *args) -> HTTPException:
    """Log the active store error and build the generic 500 to raise."""
    logger.exception(message, *args)
    return HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.get("/products", response_model=List[Product], responses=error_responses)
def list_products(
    count: int = Query(
        default=DEFAULT_COUNT, ge=SQL_INT_MIN, le=SQL_INT_MAX,
        description="Maximum number of products to return",
    ),
    start: int = Query(
        default=0, ge=SQL_INT_MIN, le=SQL_INT_MAX,
        description="Number of products to skip",
    ),
    conn=Depends(get_db),
):
    """
    List products by ascending id.

    - **count**: page size; values outside 1-10 fall back to 10
    - **start**: offset; negative values fall back to 0
    """
    if count < 1 or count > MAX_COUNT:
        count = DEFAULT_COUNT
    if start < 0:
        start = 0

    try:
        return storage.list_products(conn, count, start)
    except sqlite3.Error:
        raise store_failure("Error listing products")


@router.get("/product/{product_id}", response_model=Product, responses=error_responses)
def get_product(
    product_id: int = Path(ge=SQL_INT_MIN, le=SQL_INT_MAX),
    conn=Depends(get_db),
):
    """
    Get a single product by ID.
    """
    try:
        return storage.get_product(conn, product_id)
    except ProductNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except sqlite3.Error:
        raise store_failure("Error getting product %s", product_id)


@router.post("/product", status_code=201, response_model=Product, responses=error_responses)
def create_product(payload: ProductPayload, conn=Depends(get_db)):
    """
    Create a product. The id is assigned by the store; price defaults to 0.00.
    """
    try:
        product = storage.create_product(conn, payload)
    except sqlite3.Error:
        raise store_failure("Error creating product")
    logger.info("Created product %s", product.id)
    return product


@router.put("/product/{product_id}", response_model=Product, responses=error_responses)
def update_product(
    payload: ProductPayload,
    product_id: int = Path(ge=SQL_INT_MIN, le=SQL_INT_MAX),
    conn=Depends(get_db),
):
    """
    Replace the name and price of a product. The id never changes.
    """
    try:
        return storage.update_product(conn, product_id, payload)
    except ProductNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except sqlite3.Error:
        raise store_failure("Error updating product %s", product_id)


@router.delete("/product/{product_id}", response_model=ResultResponse, responses=error_responses)
def delete_product(
    product_id: int = Path(ge=SQL_INT_MIN, le=SQL_INT_MAX),
    conn=Depends(get_db),
):
    """
    Delete a product.
    """
    try:
        storage.delete_product(conn, product_id)
    except ProductNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except sqlite3.Error:
        raise store_failure("Error deleting product %s", product_id)
    logger.info("Deleted product %s", product_id)
    return ResultResponse(result="success")
