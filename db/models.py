"""
db.models - SQLAlchemy ORM declarations.

Tables
------
products  - one row per sellable item.  The barcode is optional but
            unique when set; price is in whole currency units.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def _new_id() -> str:
    return str(uuid.uuid4())


class Product(Base):
    __tablename__ = "products"

    # ── Primary key ────────────────────────────────────────────────────
    id = Column(String(36), primary_key=True, default=_new_id)

    # ── Catalogue data ─────────────────────────────────────────────────
    name           = Column(String(200), nullable=False, index=True)
    barcode        = Column(String(64), unique=True, nullable=True, index=True)
    description    = Column(Text, default="")
    price          = Column(Integer, nullable=False, default=0)
    stock_quantity = Column(Integer, nullable=False, default=0)
    min_stock      = Column(Integer, nullable=False, default=0)
    is_active      = Column(Boolean, nullable=False, default=True)

    # ── Timestamps ─────────────────────────────────────────────────────
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    # ── Serialisation ──────────────────────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "barcode": self.barcode,
            "description": self.description or "",
            "price": self.price,
            "stock_quantity": self.stock_quantity,
            "min_stock": self.min_stock,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else "",
            "updated_at": self.updated_at.isoformat() if self.updated_at else "",
        }
