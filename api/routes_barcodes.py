"""
api.routes_barcodes - /api/v1/barcodes validation, check digits,
internal codes and product lookup.
"""

from flask import request, jsonify

from api import api_bp
from barcodes import checksum, generate_internal_code, validate
from db import get_session
from services.barcode_service import BarcodeService
import config


@api_bp.route("/barcodes/validate", methods=["POST"])
def validate_barcode():
    """
    POST /api/v1/barcodes/validate

    JSON body: {barcode}.  Always 200; the verdict is in the body.
    """
    data = request.get_json(silent=True) or {}
    barcode = str(data.get("barcode", ""))
    return jsonify(validate(barcode, config.INTERNAL_PREFIX).to_dict())


@api_bp.route("/barcodes/check-digit", methods=["POST"])
def check_digit():
    """
    POST /api/v1/barcodes/check-digit

    JSON body: {kind: EAN13|EAN8|UPCA, digits}.
    """
    data = request.get_json(silent=True) or {}
    kind = str(data.get("kind", "")).upper()
    digits = str(data.get("digits", ""))
    try:
        digit = checksum(kind, digits)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({
        "kind": kind,
        "digits": digits,
        "check_digit": digit,
        "barcode": digits + digit,
    })


@api_bp.route("/barcodes/internal", methods=["POST"])
def mint_internal_code():
    """
    POST /api/v1/barcodes/internal

    JSON body (optional): {prefix}.  Defaults to config.INTERNAL_PREFIX.
    """
    data = request.get_json(silent=True) or {}
    prefix = str(data.get("prefix") or config.INTERNAL_PREFIX)
    return jsonify({"barcode": generate_internal_code(prefix)}), 201


@api_bp.route("/barcodes/lookup")
def lookup_barcode():
    """GET /api/v1/barcodes/lookup?barcode=…"""
    barcode = request.args.get("barcode", "")
    session = get_session()
    try:
        result = BarcodeService.lookup(session, barcode)
        if not result.found:
            status = 400 if not barcode.strip() else 404
            return jsonify({"error": result.error}), status
        return jsonify(result.product.to_dict())
    finally:
        session.close()


@api_bp.route("/barcodes/unique")
def barcode_unique():
    """GET /api/v1/barcodes/unique?barcode=…&exclude=<product id>"""
    barcode = request.args.get("barcode", "").strip()
    exclude = request.args.get("exclude", "").strip() or None
    session = get_session()
    try:
        unique = BarcodeService.is_unique(session, barcode, exclude)
        return jsonify({"barcode": barcode, "unique": unique})
    finally:
        session.close()
