"""
services.barcode_service - Barcode lookup and assignment on products.

Outcomes that a cashier or clerk should see (empty input, unknown
barcode, duplicate, bad format) come back as result objects; only
programming errors raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from barcodes.formats import DEFAULT_INTERNAL_PREFIX, EMPTY_BARCODE_ERROR, validate
from barcodes.internal_code import InternalCodeGenerator
from db.models import Product

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "product not found"
PRODUCT_ID_REQUIRED = "product id must not be empty"
DUPLICATE_BARCODE = "barcode already used by another product"


@dataclass
class LookupResult:
    found: bool
    product: Optional[Product] = None
    error: Optional[str] = None


@dataclass
class AssignResult:
    success: bool
    barcode: Optional[str] = None
    error: Optional[str] = None


class BarcodeService:

    @staticmethod
    def lookup(session: Session, barcode: str) -> LookupResult:
        """Find the active product carrying *barcode*."""
        if not barcode or not barcode.strip():
            return LookupResult(False, error=EMPTY_BARCODE_ERROR)

        product = session.query(Product).filter(
            Product.barcode == barcode.strip(),
            Product.is_active.is_(True),
        ).first()
        if product is None:
            return LookupResult(False, error=PRODUCT_NOT_FOUND)
        return LookupResult(True, product=product)

    @staticmethod
    def is_unique(session: Session, barcode: str,
                  exclude_product_id: Optional[str] = None) -> bool:
        """True when no product other than *exclude_product_id* uses *barcode*."""
        if not barcode or not barcode.strip():
            return False

        query = session.query(Product.id).filter(Product.barcode == barcode.strip())
        if exclude_product_id:
            query = query.filter(Product.id != exclude_product_id)
        return query.first() is None

    @staticmethod
    def assign(session: Session, product_id: str, barcode: str,
               internal_prefix: str = DEFAULT_INTERNAL_PREFIX) -> AssignResult:
        """Validate *barcode*, check it is free, and store it on the product."""
        if not product_id:
            return AssignResult(False, error=PRODUCT_ID_REQUIRED)
        if not barcode or not barcode.strip():
            return AssignResult(False, error=EMPTY_BARCODE_ERROR)

        barcode = barcode.strip()
        verdict = validate(barcode, internal_prefix)
        if not verdict.is_valid:
            return AssignResult(False, error=verdict.error)

        product = session.get(Product, product_id)
        if product is None:
            return AssignResult(False, error=PRODUCT_NOT_FOUND)

        if not BarcodeService.is_unique(session, barcode, product_id):
            logger.warning(f"Barcode {barcode} already taken, not assigned to {product_id}")
            return AssignResult(False, error=DUPLICATE_BARCODE)

        product.barcode = barcode
        session.flush()
        logger.info(f"Assigned {verdict.format} barcode {barcode} to product {product_id}")
        return AssignResult(True, barcode=barcode)

    @staticmethod
    def generate_and_assign(session: Session, product_id: str,
                            generator: InternalCodeGenerator,
                            prefix: str = DEFAULT_INTERNAL_PREFIX) -> AssignResult:
        """
        Mint internal codes until one is also free in the database, then
        assign it.  Bounded by the generator's attempt limit.
        """
        if session.get(Product, product_id) is None:
            return AssignResult(False, error=PRODUCT_NOT_FOUND)

        for _ in range(generator.max_attempts):
            code = generator.generate(prefix)
            if BarcodeService.is_unique(session, code, product_id):
                return BarcodeService.assign(session, product_id, code, prefix)
            logger.debug(f"Minted code {code} already stored in database, retrying")

        return AssignResult(False, error="unable to mint a barcode unused in the database")
