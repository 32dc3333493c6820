"""
Persistence gateway for the products table.

Every operation maps to exactly one ORM call. A missing row is reported as
``None``; anything the database rejects surfaces as ``StoreError``.
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import StoreError
from .models import Product

logger = logging.getLogger(__name__)

# Columns a client may write; id and timestamps belong to the store.
WRITABLE_FIELDS = ("name", "description", "price", "stock")

class ProductGateway:
    def __init__(self, session: Session):
        self.session = session

    def _fail(self, action: str, exc: SQLAlchemyError) -> StoreError:
        self.session.rollback()
        return StoreError(f"store failure while {action}: {exc.__class__.__name__}")

    def find_all(self) -> List[Product]:
        try:
            stmt = select(Product).order_by(Product.created_at, Product.id)
            return list(self.session.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            raise self._fail("listing products", exc) from exc

    def find_by_id(self, product_id: str) -> Optional[Product]:
        try:
            return self.session.get(Product, product_id)
        except SQLAlchemyError as exc:
            raise self._fail(f"reading product {product_id}", exc) from exc

    def insert(self, fields: dict) -> Product:
        now = datetime.utcnow()
        p = Product(**{k: v for k, v in fields.items() if k in WRITABLE_FIELDS})
        p.created_at = now
        p.updated_at = now
        try:
            self.session.add(p)
            self.session.flush()
            self.session.refresh(p)
        except SQLAlchemyError as exc:
            raise self._fail("inserting product", exc) from exc
        logger.info("product %s created", p.id)
        return p

    def update(self, product_id: str, fields: dict) -> Optional[Product]:
        try:
            p = self.session.get(Product, product_id)
            if p is None:
                return None
            for key, value in fields.items():
                if key in WRITABLE_FIELDS:
                    setattr(p, key, value)
            self.session.flush()
            self.session.refresh(p)
        except SQLAlchemyError as exc:
            raise self._fail(f"updating product {product_id}", exc) from exc
        logger.info("product %s updated (%s)", product_id, ", ".join(sorted(fields)) or "no changes")
        return p

    def delete(self, product_id: str) -> Optional[Product]:
        try:
            p = self.session.get(Product, product_id)
            if p is None:
                return None
            self.session.delete(p)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise self._fail(f"deleting product {product_id}", exc) from exc
        logger.info("product %s deleted", product_id)
        return p
