import os
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import controller
from .db import get_session
from .schemas import ProductCreate, ProductUpdate

# Prefix for product routes. Set API_PREFIX="" if your gateway strips /api.
API_PREFIX = os.getenv("API_PREFIX", "/api").strip()
if API_PREFIX and not API_PREFIX.startswith("/"):
    API_PREFIX = "/" + API_PREFIX
API_PREFIX = API_PREFIX.rstrip("/")

router = APIRouter(prefix=f"{API_PREFIX}/products", tags=["products"])

@router.get("")
def list_products(session: Session = Depends(get_session)):
    return controller.list_products(session)

@router.post("")
def create_product(payload: ProductCreate, session: Session = Depends(get_session)):
    return controller.create_product(payload, session)

@router.get("/{product_id}")
def get_product(product_id: str, session: Session = Depends(get_session)):
    return controller.get_product(product_id, session)

@router.put("/{product_id}")
def update_product(product_id: str, payload: ProductUpdate, session: Session = Depends(get_session)):
    return controller.update_product(product_id, payload, session)

@router.delete("/{product_id}")
def delete_product(product_id: str, session: Session = Depends(get_session)):
    return controller.delete_product(product_id, session)
