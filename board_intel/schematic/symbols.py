# board_intel/schematic/symbols.py
"""Schematic symbol drawings.

Each drawer returns SVG element strings in the symbol's local frame
(origin at the top-left of its footprint); the document renderer wraps
them in a translated <g>.
"""
from __future__ import annotations
from html import escape
from typing import Callable, Dict, List

from board_intel.schema.types import PlacedComponent

INK = "#1f2937"
MUTED = "#6b7280"
BODY_FILL = "#f3f4f6"
FONT_FAMILY = "Arial, sans-serif"


def fmt(v: float) -> str:
    v = float(v)
    return str(int(v)) if v.is_integer() else f"{round(v, 3)}"


def _line(x1, y1, x2, y2, sw: float = 2, color: str = INK) -> str:
    return (f'<line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
            f'stroke="{color}" stroke-width="{fmt(sw)}"/>')


def _path(d: str, sw: float = 2) -> str:
    return f'<path d="{d}" stroke="{INK}" stroke-width="{fmt(sw)}" fill="none"/>'


def _rect(x, y, w, h, fill: str = BODY_FILL) -> str:
    return (f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(w)}" height="{fmt(h)}" '
            f'fill="{fill}" stroke="{INK}" stroke-width="2"/>')


def _circle(cx, cy, r, fill: str = "none", sw: float = 2) -> str:
    stroke = f' stroke="{INK}" stroke-width="{fmt(sw)}"' if sw else ""
    return f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" r="{fmt(r)}" fill="{fill}"{stroke}/>'


def text(x, y, txt: str, size: float = 12, weight: str = "normal", fill: str = INK,
         anchor: str = "start", cls: str = "") -> str:
    klass = f' class="{cls}"' if cls else ""
    anchor_attr = f' text-anchor="{anchor}"' if anchor != "start" else ""
    return (f'<text{klass} x="{fmt(x)}" y="{fmt(y)}"{anchor_attr} font-family="{FONT_FAMILY}" '
            f'font-size="{fmt(size)}" font-weight="{weight}" fill="{fill}">{escape(txt, quote=False)}</text>')


def component_text(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    parts = [text(w / 2, h + 15, pc.label, size=12, weight="bold", anchor="middle", cls="label")]
    if pc.value:
        parts.append(text(w / 2, h + 30, pc.value, size=10, fill=MUTED, anchor="middle", cls="value"))
    return parts


# ---------------------------------------------------------------------------
# Component symbols
# ---------------------------------------------------------------------------

def resistor(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    m = h / 2
    d = (f"M 0 {fmt(m)} L 10 {fmt(m)} L 15 {fmt(m - 8)} L 25 {fmt(m + 8)} L 35 {fmt(m - 8)} "
         f"L 45 {fmt(m + 8)} L 50 {fmt(m)} L {fmt(w)} {fmt(m)}")
    return [_path(d)]


def capacitor(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    return [
        _line(w / 2 - 3, h / 4, w / 2 - 3, 3 * h / 4, sw=3),
        _line(w / 2 + 3, h / 4, w / 2 + 3, 3 * h / 4, sw=3),
        _line(0, h / 2, w / 2 - 3, h / 2),
        _line(w / 2 + 3, h / 2, w, h / 2),
    ]


def ic(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    parts = [_rect(10, 10, w - 20, h - 20), _circle(15, 15, 3, fill=INK, sw=0)]
    for pin in pc.pins:
        y = pin.position[1]
        if pin.side == "left":
            parts.append(_line(0, y, 10, y))
        elif pin.side == "right":
            parts.append(_line(w - 10, y, w, y))
    return parts


def diode(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    cx, cy = w / 2, h / 2
    tri = f"{fmt(cx - 8)},{fmt(cy)} {fmt(cx + 8)},{fmt(cy - 8)} {fmt(cx + 8)},{fmt(cy + 8)}"
    return [
        f'<polygon points="{tri}" fill="{INK}"/>',
        _line(cx + 8, cy - 10, cx + 8, cy + 10, sw=3),
        _line(0, cy, cx - 8, cy),
        _line(cx + 8, cy, w, cy),
    ]


def transistor(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    cx, cy = w / 2, h / 2
    return [
        _circle(cx, cy, min(w, h) / 3),
        _line(cx - 8, cy - 8, cx - 8, cy + 8, sw=3),     # base
        _line(cx - 8, cy - 5, cx + 8, cy - 12),          # collector
        _line(cx - 8, cy + 5, cx + 8, cy + 12),          # emitter
    ]


def inductor(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    m = h / 2
    d = (f"M 0 {fmt(m)} L 10 {fmt(m)} "
         f"C 15 {fmt(m - 8)} 20 {fmt(m - 8)} 25 {fmt(m)} "
         f"C 30 {fmt(m + 8)} 35 {fmt(m + 8)} 40 {fmt(m)} "
         f"L {fmt(w)} {fmt(m)}")
    return [_path(d)]


def generic(pc: PlacedComponent) -> List[str]:
    w, h = pc.size
    return [_rect(0, 0, w, h)]


SYMBOL_REGISTRY: Dict[str, Callable[[PlacedComponent], List[str]]] = {
    "resistor": resistor,
    "capacitor": capacitor,
    "ic": ic,
    "diode": diode,
    "transistor": transistor,
    "inductor": inductor,
}


def draw_symbol(pc: PlacedComponent) -> List[str]:
    """Body for the symbol kind (generic box when unknown) plus label/value text."""
    draw = SYMBOL_REGISTRY.get(pc.symbol, generic)
    return draw(pc) + component_text(pc)
