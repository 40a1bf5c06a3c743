"""
api.routes_products - /api/v1/products listing and barcode assignment.
"""

from flask import request, jsonify

from api import api_bp
from barcodes import default_generator
from db import get_session
from services.barcode_service import BarcodeService, PRODUCT_NOT_FOUND
from services.products_service import ProductsService
import config


@api_bp.route("/products")
def list_products():
    """GET /api/v1/products?q=&limit=100&offset=0"""
    q = request.args.get("q", "").strip()
    limit = min(int(request.args.get("limit", config.API_DEFAULT_LIMIT)),
                config.API_MAX_LIMIT)
    offset = int(request.args.get("offset", 0))

    session = get_session()
    try:
        products, total = ProductsService.list_active(session, q=q, limit=limit,
                                                      offset=offset)
        return jsonify({
            "total": total,
            "offset": offset,
            "limit": limit,
            "products": [p.to_dict() for p in products],
        })
    finally:
        session.close()


@api_bp.route("/products/<product_id>")
def get_product(product_id: str):
    """GET /api/v1/products/{id}"""
    session = get_session()
    try:
        product = ProductsService.get(session, product_id)
        if not product:
            return jsonify({"error": "not found"}), 404
        return jsonify(product.to_dict())
    finally:
        session.close()


@api_bp.route("/products", methods=["POST"])
def create_product():
    """
    POST /api/v1/products

    JSON body: {name, price, barcode?, description?, stock_quantity?}.
    A supplied barcode must pass the same checks as PUT …/barcode.
    """
    data = request.get_json(force=True)
    barcode = str(data.pop("barcode", "") or "").strip()
    session = get_session()
    try:
        product = ProductsService.create(session, data)
        if barcode:
            result = BarcodeService.assign(session, product.id, barcode,
                                           config.INTERNAL_PREFIX)
            if not result.success:
                session.rollback()
                return jsonify({"error": result.error}), 400
        session.commit()
        return jsonify(product.to_dict()), 201
    except Exception as exc:
        session.rollback()
        return jsonify({"error": str(exc)}), 400
    finally:
        session.close()


@api_bp.route("/products/<product_id>/barcode", methods=["PUT"])
def assign_barcode(product_id: str):
    """PUT /api/v1/products/{id}/barcode  (JSON body: {barcode})"""
    data = request.get_json(silent=True) or {}
    session = get_session()
    try:
        result = BarcodeService.assign(session, product_id,
                                       str(data.get("barcode", "")),
                                       config.INTERNAL_PREFIX)
        return _assignment_response(session, product_id, result)
    finally:
        session.close()


@api_bp.route("/products/<product_id>/barcode/generate", methods=["POST"])
def generate_barcode(product_id: str):
    """POST /api/v1/products/{id}/barcode/generate  (JSON body: {prefix?})"""
    data = request.get_json(silent=True) or {}
    prefix = str(data.get("prefix") or config.INTERNAL_PREFIX)
    session = get_session()
    try:
        result = BarcodeService.generate_and_assign(
            session, product_id, default_generator(), prefix,
        )
        return _assignment_response(session, product_id, result)
    finally:
        session.close()


def _assignment_response(session, product_id: str, result):
    if not result.success:
        session.rollback()
        status = 404 if result.error == PRODUCT_NOT_FOUND else 400
        return jsonify({"error": result.error}), status
    session.commit()
    return jsonify(ProductsService.get(session, product_id).to_dict())
