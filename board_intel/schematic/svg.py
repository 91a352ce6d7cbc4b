"""SchematicRenderer: SchematicModel to a standalone SVG document.

The document lives in a fixed 1000x800 coordinate space. Every placed
symbol becomes one <g class="component"> whose attributes carry the id,
type, label, value and footprint, so the file can be read back with
board_intel.parsers.svg_parse.
"""

from __future__ import annotations

from html import escape
from pathlib import Path

from loguru import logger

from board_intel.schema.types import Annotation, PlacedComponent, PowerRail, SchematicModel, Wire
from board_intel.schematic.symbols import draw_symbol, fmt, text

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 800
GRID_STEP = 50

COLOR_BG = "#f8f9fa"
COLOR_TITLE = "#1f2937"
COLOR_GRID = "#6b7280"
COLOR_WIRE = "#059669"


def _attr(v) -> str:
    return escape(str(v), quote=True)


class SchematicRenderer:
    """Renders a SchematicModel into SVG."""

    def __init__(self, schematic: SchematicModel, width: int = CANVAS_WIDTH,
                 height: int = CANVAS_HEIGHT, grid: int = GRID_STEP, draw_grid: bool = True):
        self.schematic = schematic
        self.width = width
        self.height = height
        self.grid = grid
        self.draw_grid = draw_grid

    def render_svg(self) -> str:
        s = self.schematic
        lines = [self._svg_header(),
                 f'<rect width="{self.width}" height="{self.height}" fill="{COLOR_BG}" stroke="none"/>']
        if self.draw_grid:
            lines.append(self._draw_grid())
        lines.append(text(20, 40, s.title or "Electronic Circuit Schematic", size=20,
                          weight="bold", fill=COLOR_TITLE, cls="title"))
        lines.extend(self._draw_component(pc) for pc in s.components)
        lines.extend(self._draw_wire(w) for w in s.wires if len(w.path) >= 2)
        lines.extend(self._draw_rail(r) for r in s.power_rails)
        lines.extend(self._draw_annotation(a) for a in s.annotations)
        lines.append("</svg>")
        return "\n".join(lines)

    def write_svg(self, path) -> Path:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.render_svg(), encoding="utf-8")
        logger.info(f"[schematic] SVG written to {p}")
        return p

    # ------------------------------------------------------------------
    # SVG construction helpers
    # ------------------------------------------------------------------

    def _svg_header(self) -> str:
        return (f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" '
                f'viewBox="0 0 {self.width} {self.height}">')

    def _draw_grid(self) -> str:
        lines = ['<g class="grid" opacity="0.1">']
        for x in range(0, self.width + 1, self.grid):
            lines.append(f'<line x1="{x}" y1="0" x2="{x}" y2="{self.height}" '
                         f'stroke="{COLOR_GRID}" stroke-width="1"/>')
        for y in range(0, self.height + 1, self.grid):
            lines.append(f'<line x1="0" y1="{y}" x2="{self.width}" y2="{y}" '
                         f'stroke="{COLOR_GRID}" stroke-width="1"/>')
        lines.append("</g>")
        return "\n".join(lines)

    def _draw_component(self, pc: PlacedComponent) -> str:
        x, y = pc.position
        w, h = pc.size
        head = (f'<g id="{_attr(pc.id)}" class="component" data-type="{_attr(pc.type.value)}" '
                f'data-symbol="{_attr(pc.symbol)}" data-label="{_attr(pc.label)}" '
                f'data-value="{_attr(pc.value)}" data-width="{fmt(w)}" data-height="{fmt(h)}" '
                f'transform="translate({fmt(x)},{fmt(y)})">')
        return "\n".join([head, *draw_symbol(pc), "</g>"])

    def _draw_wire(self, wire: Wire) -> str:
        pts = " ".join(f"{fmt(px)},{fmt(py)}" for px, py in wire.path)
        return (f'<polyline id="{_attr(wire.id)}" class="wire" data-net="{_attr(wire.net_name)}" '
                f'points="{pts}" fill="none" stroke="{COLOR_WIRE}" stroke-width="2"/>')

    def _draw_rail(self, rail: PowerRail) -> str:
        x1, x2 = rail.x_span
        return "\n".join([
            f'<line class="rail" data-rail="{_attr(rail.name)}" x1="{fmt(x1)}" y1="{fmt(rail.y)}" '
            f'x2="{fmt(x2)}" y2="{fmt(rail.y)}" stroke="{rail.color}" stroke-width="4"/>',
            text(20, rail.y - 5, f"{rail.name} ({rail.voltage})", size=12, weight="bold",
                 fill=rail.color, cls="rail-label"),
        ])

    def _draw_annotation(self, a: Annotation) -> str:
        return text(a.position[0], a.position[1], a.text, size=a.font_size, weight=a.font_weight,
                    cls="annotation")


def export_svg(schematic: SchematicModel, path=None, **kw) -> str:
    r = SchematicRenderer(schematic, **kw)
    if path is not None:
        r.write_svg(path)
    return r.render_svg()
