"""
HTTP-facing product operations.

Each operation makes exactly one service call and answers with the uniform
envelope ``{"success", "message", "data"?}``. ``data`` is left out entirely
when there is nothing to return.
"""
import logging
from typing import Any, Optional
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import service
from .errors import NotFoundError, StoreError, ValidationError
from .schemas import ProductCreate, ProductOut, ProductUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "stock")

def respond(status_code: int, success: bool, message: str, data: Optional[Any] = None) -> JSONResponse:
    body = {"success": success, "message": message}
    if data is not None:
        body["data"] = data
    return JSONResponse(status_code=status_code, content=body)

def _dump(product) -> dict:
    return ProductOut.model_validate(product).model_dump(mode="json", by_alias=True)

def _failure(exc: Exception, message: str) -> JSONResponse:
    # Client-caused kinds keep their own message; everything else is a 500
    # with the operation's generic message and the cause only in the log.
    if isinstance(exc, (ValidationError, NotFoundError)):
        logger.info("%s: %s", exc.__class__.__name__, exc.message)
        return respond(exc.status_code, False, exc.message)
    if isinstance(exc, StoreError):
        logger.error("%s: %s", message, exc.message, exc_info=exc)
    else:
        logger.exception("%s: unexpected error", message)
    return respond(500, False, message)

# 1. list
def list_products(session: Session) -> JSONResponse:
    try:
        products = service.get_all_products(session)
        return respond(200, True, "Get all products", [_dump(p) for p in products])
    except Exception as exc:
        return _failure(exc, "Error retrieving product list")

# 2. get by id
def get_product(product_id: str, session: Session) -> JSONResponse:
    try:
        product = service.get_product_by_id(session, product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return respond(200, True, "Get product by ID", _dump(product))
    except Exception as exc:
        return _failure(exc, "Error retrieving product details")

# 3. create
def create_product(payload: ProductCreate, session: Session) -> JSONResponse:
    try:
        if not payload.name or payload.price is None or payload.stock is None:
            raise ValidationError("Missing product information")
        product = service.create_product(session, payload.model_dump())
        return respond(201, True, "Product added successfully", _dump(product))
    except Exception as exc:
        return _failure(exc, "Error adding product")

# 4. update
def update_product(product_id: str, payload: ProductUpdate, session: Session) -> JSONResponse:
    try:
        changes = payload.changes()
        if any(field in changes and changes[field] is None for field in REQUIRED_FIELDS):
            raise ValidationError("Invalid product information")
        product = service.update_product(session, product_id, changes)
        if product is None:
            raise NotFoundError("Product not found")
        return respond(200, True, "Product updated successfully", _dump(product))
    except Exception as exc:
        return _failure(exc, "Error updating product")

# 5. delete
def delete_product(product_id: str, session: Session) -> JSONResponse:
    try:
        product = service.delete_product(session, product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return respond(200, True, "Product deleted successfully", _dump(product))
    except Exception as exc:
        return _failure(exc, "Error deleting product")
