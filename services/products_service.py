"""
services.products_service - Product records feeding the label engine.

All session management is the caller's responsibility (open before,
close/commit after).  This keeps the service testable and allows
the caller to batch multiple operations in one transaction.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from db.models import Product


class ProductsService:

    # ── Create ─────────────────────────────────────────────────────────

    @staticmethod
    def create(session: Session, data: dict) -> Product:
        """
        Create a Product from a dict.  Required: name, price.
        A barcode, if given, is stored as-is; format and uniqueness
        checks belong to BarcodeService.assign().
        """
        name = str(data.get("name", "")).strip()
        if not name:
            raise ValueError("name is required")
        price = int(data.get("price", 0))
        if price < 0:
            raise ValueError("price must not be negative")

        barcode = str(data.get("barcode") or "").strip() or None
        product = Product(
            name=name,
            price=price,
            barcode=barcode,
            description=str(data.get("description", "")).strip(),
            stock_quantity=int(data.get("stock_quantity", 0)),
            min_stock=int(data.get("min_stock", 0)),
            is_active=bool(data.get("is_active", True)),
        )
        session.add(product)
        session.flush()
        return product

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, product_id: str) -> Product | None:
        return session.get(Product, product_id)

    @staticmethod
    def get_many(session: Session, product_ids: list[str]) -> dict[str, Product]:
        if not product_ids:
            return {}
        rows = session.query(Product).filter(Product.id.in_(set(product_ids))).all()
        return {p.id: p for p in rows}

    @staticmethod
    def list_active(session: Session, q: str = "", limit: int = 100,
                    offset: int = 0) -> tuple[list[Product], int]:
        """Active products, optionally filtered by name/barcode substring."""
        query = session.query(Product).filter(Product.is_active.is_(True))
        if q:
            like = f"%{q}%"
            query = query.filter(
                Product.name.ilike(like) | Product.barcode.ilike(like)
            )
        total = query.count()
        rows = query.order_by(Product.name).offset(offset).limit(limit).all()
        return rows, total
