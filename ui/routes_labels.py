"""
ui.routes_labels - Label preview, download and batch printing.

Single labels come back as SVG, batches as one self-contained HTML page
that the browser can print directly.
"""

import logging

from flask import request, Response, jsonify

from ui import ui_bp
from db import get_session
from labels import (
    LABEL_DIMENSIONS, LabelBatchItem, LabelRequest, LabelSize,
    assemble_batch, parse_size, render_label,
)
from services.products_service import ProductsService
import config

logger = logging.getLogger(__name__)

SVG_MIMETYPE = "image/svg+xml"


def _size_arg(value):
    """LabelSize from a request value, or a (response, status) tuple."""
    try:
        return parse_size(value or config.DEFAULT_LABEL_SIZE), None
    except ValueError as exc:
        return None, (jsonify({"error": str(exc)}), 400)


@ui_bp.route("/labels/sizes")
def label_sizes():
    """Available label presets."""
    return jsonify({
        "sizes": [
            {"size": s.value,
             "width_mm": LABEL_DIMENSIONS[s].width_mm,
             "height_mm": LABEL_DIMENSIONS[s].height_mm}
            for s in LabelSize
        ],
        "default": config.DEFAULT_LABEL_SIZE,
    })


@ui_bp.route("/labels/preview")
def label_preview():
    """
    GET /labels/preview?barcode=…&name=…&price=15000&size=38x25

    Render an ad-hoc label without touching the database.
    """
    barcode = request.args.get("barcode", "")
    if not barcode.strip():
        return jsonify({"error": "barcode required"}), 400

    size, error = _size_arg(request.args.get("size"))
    if error:
        return error

    try:
        price = int(request.args.get("price", "0"))
    except ValueError:
        return jsonify({"error": "price must be a whole number"}), 400
    if price < 0:
        return jsonify({"error": "price must not be negative"}), 400

    label = LabelRequest(barcode, request.args.get("name", ""), price, size)
    return Response(render_label(label, config.CURRENCY), mimetype=SVG_MIMETYPE)


@ui_bp.route("/labels/products/<product_id>.svg")
def product_label(product_id: str):
    """
    GET /labels/products/{id}.svg?size=50x30&download=1

    Label for a stored product.  download=1 sends it as an attachment.
    """
    size, error = _size_arg(request.args.get("size"))
    if error:
        return error

    session = get_session()
    try:
        product = ProductsService.get(session, product_id)
        if not product:
            return jsonify({"error": "Product not found"}), 404
        if not product.barcode:
            return jsonify({"error": "Product has no barcode"}), 400

        svg = render_label(
            LabelRequest(product.barcode, product.name, product.price, size),
            config.CURRENCY,
        )
        headers = {}
        if request.args.get("download", "0") == "1":
            safe_barcode = "".join(c if c.isalnum() else "_" for c in product.barcode)
            headers["Content-Disposition"] = (
                f"attachment; filename=label_{safe_barcode}_{size}.svg"
            )
        return Response(svg, mimetype=SVG_MIMETYPE, headers=headers)
    finally:
        session.close()


@ui_bp.route("/labels/print", methods=["POST"])
def print_labels():
    """
    POST /labels/print?download=1

    JSON body: {size, items: [{product_id, quantity}]}.
    Products without a barcode are skipped.  Returns the print page.
    """
    data = request.get_json(silent=True) or {}
    size, error = _size_arg(data.get("size"))
    if error:
        return error

    wanted = data.get("items") or []
    if not isinstance(wanted, list) or not wanted:
        return jsonify({"error": "items required"}), 400
    if not all(isinstance(w, dict) for w in wanted):
        return jsonify({"error": "each item must be an object with product_id"}), 400

    session = get_session()
    try:
        products = ProductsService.get_many(
            session, [str(w.get("product_id", "")) for w in wanted]
        )

        items = []
        for entry in wanted:
            product = products.get(str(entry.get("product_id", "")))
            if product is None:
                return jsonify({"error": f"Product not found: {entry.get('product_id')}"}), 404
            if not product.barcode:
                logger.warning(f"Skipping product {product.id}: no barcode")
                continue
            quantity = entry.get("quantity", 1)
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                return jsonify({"error": f"quantity must be a whole number, got {quantity!r}"}), 400
            try:
                items.append(LabelBatchItem(
                    product_id=product.id,
                    barcode=product.barcode,
                    product_name=product.name,
                    price=product.price,
                    quantity=quantity,
                ))
            except ValueError as exc:
                return jsonify({"error": str(exc)}), 400
    finally:
        session.close()

    if not items:
        return jsonify({"error": "None of the selected products has a barcode"}), 400

    total = sum(item.quantity for item in items)
    if total > config.MAX_LABELS_PER_BATCH:
        return jsonify({
            "error": f"Too many labels ({total}); limit is {config.MAX_LABELS_PER_BATCH}"
        }), 400

    doc = assemble_batch(items, size, config.CURRENCY)
    headers = {"X-Label-Count": str(doc.label_count)}
    if request.args.get("download", "0") == "1":
        headers["Content-Disposition"] = f"attachment; filename={doc.filename}"
    return Response(doc.content, mimetype=doc.media_type, headers=headers)
