"""
services - Business-logic layer sitting between API/UI and DB.
"""

from services.products_service import ProductsService     # noqa: F401
from services.barcode_service import BarcodeService       # noqa: F401
