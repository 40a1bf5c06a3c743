"""
labels.document - Minimal SVG document model.

A label is assembled as an ordered list of drawing primitives and only
turned into markup by SvgDocument.to_svg().  All text content and
attribute values pass through escape_xml() on the way out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

SVG_NS = "http://www.w3.org/2000/svg"

# Order matters: '&' first so entities are not escaped twice
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def _num(value: float) -> str:
    """Integers stay bare, everything else gets two decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: Union[float, str]
    height: Union[float, str]
    fill: str = "black"

    def to_svg(self) -> str:
        w = self.width if isinstance(self.width, str) else _num(self.width)
        h = self.height if isinstance(self.height, str) else _num(self.height)
        return (f'<rect x="{_num(self.x)}" y="{_num(self.y)}" '
                f'width="{escape_xml(w)}" height="{escape_xml(h)}" '
                f'fill="{escape_xml(self.fill)}"/>')


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    font_size: int
    font_family: str = "Arial, sans-serif"
    anchor: str = "middle"
    bold: bool = False
    fill: str = "black"

    def to_svg(self) -> str:
        weight = ' font-weight="bold"' if self.bold else ""
        return (f'<text x="{_num(self.x)}" y="{_num(self.y)}" '
                f'text-anchor="{escape_xml(self.anchor)}" '
                f'font-family="{escape_xml(self.font_family)}" '
                f'font-size="{self.font_size}"{weight} '
                f'fill="{escape_xml(self.fill)}">{escape_xml(self.content)}</text>')


@dataclass
class Group:
    dx: float = 0
    dy: float = 0
    children: list = field(default_factory=list)

    def add(self, element) -> "Group":
        self.children.append(element)
        return self

    def to_svg(self) -> str:
        inner = "".join(child.to_svg() for child in self.children)
        return f'<g transform="translate({_num(self.dx)}, {_num(self.dy)})">{inner}</g>'


@dataclass
class SvgDocument:
    width: int
    height: int
    elements: list = field(default_factory=list)

    def add(self, element) -> "SvgDocument":
        self.elements.append(element)
        return self

    def texts(self) -> list[Text]:
        """Top-level text primitives, in drawing order."""
        return [e for e in self.elements if isinstance(e, Text)]

    def to_svg(self) -> str:
        body = "\n  ".join(e.to_svg() for e in self.elements)
        return (f'<svg xmlns="{SVG_NS}" width="{self.width}" height="{self.height}" '
                f'viewBox="0 0 {self.width} {self.height}">\n'
                f"  {body}\n"
                f"</svg>")
