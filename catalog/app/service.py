from typing import List, Optional
from sqlalchemy.orm import Session

from .gateway import ProductGateway
from .models import Product

# Thin seam between the HTTP layer and the gateway; no rules live here yet.

def get_all_products(session: Session) -> List[Product]:
    return ProductGateway(session).find_all()

def get_product_by_id(session: Session, product_id: str) -> Optional[Product]:
    return ProductGateway(session).find_by_id(product_id)

def create_product(session: Session, fields: dict) -> Product:
    return ProductGateway(session).insert(fields)

def update_product(session: Session, product_id: str, fields: dict) -> Optional[Product]:
    return ProductGateway(session).update(product_id, fields)

def delete_product(session: Session, product_id: str) -> Optional[Product]:
    return ProductGateway(session).delete(product_id)
