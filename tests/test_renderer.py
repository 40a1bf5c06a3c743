import random
import string

import pytest

from barcodes import bar_runs, encode_code128
from labels import (
    LABEL_DIMENSIONS, LABEL_LAYOUTS, LabelRequest, LabelSize, build_label,
    format_currency, get_label_dimensions, render_label, truncate_text,
    validate_label_content,
)
from labels.document import Group, Rect


def test_reference_label():
    request = LabelRequest("1234567890", "Test Product", 15000, "38x25")
    svg = render_label(request)
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert "1234567890" in svg
    assert "Test Product" in svg
    assert format_currency(15000) in svg
    assert "Rp\u00a015.000" in svg
    assert validate_label_content(svg, request)


def test_fifty_by_thirty_dimensions():
    svg = render_label(LabelRequest("ABC123", "Another Product", 25000, LabelSize.S50X30))
    assert 'width="189" height="113"' in svg
    assert 'viewBox="0 0 189 113"' in svg


def test_size_strings_are_coerced():
    assert LabelRequest("1", "x", 1, "50x30").size is LabelSize.S50X30
    with pytest.raises(ValueError, match="Invalid label size"):
        LabelRequest("1", "x", 1, "100x50")


@pytest.mark.parametrize(
    "text,limit,expected",
    [
        ("Short", 18, "Short"),
        ("Exactly eighteen!!", 18, "Exactly eighteen!!"),
        ("This is a very long product name", 18, "This is a very l.."),
        ("abcdefghijklmnopqrstuvwxyz", 24, "abcdefghijklmnopqrstuv.."),
    ],
)
def test_truncate_text(text, limit, expected):
    result = truncate_text(text, limit)
    assert result == expected
    assert len(result) <= limit


def test_long_names_are_truncated_on_the_label():
    name = "This is a very long product name that should be truncated"
    svg = render_label(LabelRequest("123", name, 10000, "38x25"))
    assert "This is a very l.." in svg
    assert name not in svg


def test_text_fields_are_escaped():
    request = LabelRequest("A<1>&'2'", 'A&B <C> "D" \'E\'', 10000, "50x30")
    svg = render_label(request)
    assert "A&amp;B &lt;C&gt; &quot;D&quot; &apos;E&apos;" in svg
    assert "A&lt;1&gt;&amp;&apos;2&apos;" in svg
    assert "<C>" not in svg
    assert validate_label_content(svg, request)


def test_text_order_and_layout():
    request = LabelRequest("ABC", "Teh Botol", 5000, "38x25")
    doc = build_label(request)
    texts = doc.texts()
    assert [t.content for t in texts] == ["ABC", "Teh Botol", format_currency(5000)]
    layout = LABEL_LAYOUTS[LabelSize.S38X25]
    assert texts[0].font_family == "monospace"
    assert texts[0].y == layout.padding + layout.barcode_height + layout.font_size + 2
    assert texts[1].y == texts[0].y + layout.font_size + 4
    assert texts[2].y == texts[1].y + layout.price_font_size + 2
    assert texts[2].font_size == layout.price_font_size


@pytest.mark.parametrize("size", list(LabelSize))
def test_bars_span_the_barcode_area(size):
    dims, layout = LABEL_DIMENSIONS[size], LABEL_LAYOUTS[size]
    doc = build_label(LabelRequest("SKU-0042", "Item", 100, size))
    bars = next(e for e in doc.elements if isinstance(e, Group))
    rects = [c for c in bars.children if isinstance(c, Rect)]

    assert len(rects) == len(bar_runs(encode_code128("SKU-0042")))
    assert (bars.dx, bars.dy) == (layout.padding, layout.padding)
    assert rects[0].x == 0
    last = rects[-1]
    assert last.x + last.width == pytest.approx(dims.width_px - 2 * layout.padding)
    assert all(r.height == layout.barcode_height for r in rects)


def test_empty_barcode_renders_without_bars():
    request = LabelRequest("", "No code", 100, "38x25")
    doc = build_label(request)
    bars = next(e for e in doc.elements if isinstance(e, Group))
    assert bars.children == []
    assert validate_label_content(doc.to_svg(), request)


def test_validate_label_content_detects_missing_fields():
    request = LabelRequest("8991234567891", "Indomie Goreng", 3500, "38x25")
    svg = render_label(request)
    assert not validate_label_content(svg, LabelRequest("8991234567891", "Indomie Goreng", 3600, "38x25"))
    assert not validate_label_content(svg, LabelRequest("8991234567892", "Indomie Goreng", 3500, "38x25"))
    assert not validate_label_content(svg, LabelRequest("8991234567891", "Indomie Kuah", 3500, "38x25"))
    assert not validate_label_content("<svg></svg>", request)


def test_every_rendered_label_validates():
    rng = random.Random(2024)
    alphabet = string.ascii_letters + string.digits + " -_&<>\"'"
    for _ in range(150):
        request = LabelRequest(
            barcode="".join(rng.choice(string.ascii_letters + string.digits)
                            for _ in range(rng.randint(1, 20))),
            product_name="".join(rng.choice(alphabet) for _ in range(rng.randint(1, 50))),
            price=rng.randint(0, 100_000_000),
            size=rng.choice(list(LabelSize)),
        )
        assert validate_label_content(render_label(request), request)


def test_get_label_dimensions():
    assert get_label_dimensions("38x25") == {"width_mm": 38, "height_mm": 25}
    assert get_label_dimensions(LabelSize.S50X30) == {"width_mm": 50, "height_mm": 30}
