# board_intel/schematic/layout.py
"""Grid placement, pin footprints, placeholder wiring, rails and callouts."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from loguru import logger

from board_intel.schema.types import (
    Annotation, CircuitBehaviorProfile, ComponentCandidate, ComponentComponentEdge, ComponentType,
    PinLayout, PlacedComponent, PowerProfile, PowerRail, SchematicModel, Wire, WireEnd,
)
from board_intel.summarize.rules import GENERIC_TITLE, TITLE_RULES, first_match

VARIABLE = "variable"


@dataclass(frozen=True)
class Symbol:
    width: float
    height: float
    pins: Union[int, str]


SYMBOL_LIBRARY: Dict[str, Symbol] = {
    "resistor":   Symbol(60, 20, 2),
    "capacitor":  Symbol(30, 40, 2),
    "ic":         Symbol(80, 60, VARIABLE),
    "diode":      Symbol(40, 30, 2),
    "transistor": Symbol(50, 50, 3),
    "inductor":   Symbol(50, 30, 2),
    "connector":  Symbol(40, 20, VARIABLE),
}
FALLBACK_SYMBOL = "resistor"

TYPE_ORDER: Tuple[str, ...] = ("connector", "ic", "transistor", "resistor", "capacitor", "diode", "inductor")

LABEL_PREFIX: Dict[ComponentType, str] = {
    ComponentType.RESISTOR: "R",
    ComponentType.CAPACITOR: "C",
    ComponentType.IC: "U",
    ComponentType.DIODE: "D",
    ComponentType.TRANSISTOR: "Q",
    ComponentType.INDUCTOR: "L",
    ComponentType.CONNECTOR: "J",
}

# not derived from component positions; see Wire.routed
PLACEHOLDER_WIRE_PATH: Tuple[Tuple[float, float], ...] = ((0, 0), (100, 0), (100, 50), (200, 50))

VCC_RAIL_Y = 70
GND_RAIL_Y = 750


@dataclass(frozen=True)
class LayoutGrid:
    origin: Tuple[float, float] = (100, 100)
    gap_x: float = 50
    row_gap: float = 80
    max_row_x: float = 800


def _type_rank(ctype: ComponentType) -> int:
    return TYPE_ORDER.index(ctype.key) if ctype.key in TYPE_ORDER else -1


def generate_pins(pin_count: int, symbol: Symbol) -> List[PinLayout]:
    w, h = symbol.width, symbol.height
    if pin_count == 2:
        return [PinLayout(id=1, position=(0, h / 2), side="left"),
                PinLayout(id=2, position=(w, h / 2), side="right")]
    if pin_count == 3:
        return [PinLayout(id=1, position=(0, h / 3), side="left", label="B"),
                PinLayout(id=2, position=(w / 2, 0), side="top", label="C"),
                PinLayout(id=3, position=(w / 2, h), side="bottom", label="E")]
    pins = []
    per_side = -(-pin_count // 2)   # ceil
    for i in range(min(per_side, pin_count)):
        pins.append(PinLayout(id=i + 1, position=(0, (i + 1) * h / (per_side + 1)), side="left"))
    for i in range(per_side):
        if i + per_side >= pin_count:
            break
        pins.append(PinLayout(id=i + per_side + 1,
                              position=(w, h - (i + 1) * h / (per_side + 1)), side="right"))
    return pins


def component_label(comp: ComponentCandidate) -> str:
    prefix = LABEL_PREFIX.get(comp.type, "X")
    parts = comp.id.split("_")
    number = parts[1] if len(parts) > 1 and parts[1] else "1"
    return f"{prefix}{number}"


def layout_components(components: Sequence[ComponentCandidate],
                      grid: LayoutGrid = LayoutGrid()) -> List[PlacedComponent]:
    """
    Stable sort by type order, pack left to right, wrap once x passes the
    column budget; each row is as tall as its tallest symbol.
    """
    x, y = grid.origin
    row_height = 0.0
    placed = []
    for comp in sorted(components, key=lambda c: _type_rank(c.type)):
        key = comp.type.key if comp.type.key in SYMBOL_LIBRARY else FALLBACK_SYMBOL
        sym = SYMBOL_LIBRARY[key]
        pin_count = sym.pins
        if pin_count == VARIABLE:
            pin_count = comp.properties.pin_count or 8
        placed.append(PlacedComponent(
            id=comp.id,
            type=comp.type,
            symbol=comp.type.key,
            position=(x, y),
            size=(sym.width, sym.height),
            pins=tuple(generate_pins(int(pin_count), sym)),
            label=component_label(comp),
            value=comp.properties.estimated_value or "",
        ))
        x += sym.width + grid.gap_x
        row_height = max(row_height, sym.height)
        if x > grid.max_row_x:
            x = grid.origin[0]
            y += row_height + grid.row_gap
            row_height = 0.0
    return placed


def route_wires(connections: Sequence) -> List[Wire]:
    """Component-component edges only; the path is a fixed placeholder, hence routed=False."""
    wires = []
    for idx, conn in enumerate(connections):
        if isinstance(conn, ComponentComponentEdge):
            wires.append(Wire(
                id=f"wire_{idx}",
                source=WireEnd(component=conn.component1, pin=1),
                target=WireEnd(component=conn.component2, pin=1),
                path=PLACEHOLDER_WIRE_PATH,
                net_name=f"NET_{idx}",
            ))
    return wires


def power_rails(components: Sequence[ComponentCandidate]) -> List[PowerRail]:
    # membership by type, not by net
    vcc = tuple(c.id for c in components if c.type in (ComponentType.IC, ComponentType.TRANSISTOR))
    gnd = tuple(c.id for c in components if c.type in (ComponentType.IC, ComponentType.CAPACITOR))
    return [
        PowerRail(name="VCC", voltage="+5V", color="#FF0000", y=VCC_RAIL_Y, members=vcc),
        PowerRail(name="GND", voltage="0V", color="#000000", y=GND_RAIL_Y, members=gnd),
    ]


def annotations(behavior: CircuitBehaviorProfile, power: PowerProfile) -> List[Annotation]:
    return [
        Annotation(text=f"Circuit Function: {', '.join(behavior.estimated_function)}",
                   position=(50, 50), font_size=14, font_weight="bold"),
        Annotation(text=f"Estimated Power: {power.estimated_total_power_mw}mW", position=(50, 80)),
        Annotation(text=f"Type: {behavior.circuit_type}", position=(50, 110)),
    ]


def schematic_title(behavior: CircuitBehaviorProfile) -> str:
    return first_match(TITLE_RULES, behavior.estimated_function, GENERIC_TITLE)


def synthesize_schematic(components: Sequence[ComponentCandidate], connections: Sequence,
                         behavior: CircuitBehaviorProfile, power: PowerProfile,
                         grid: Optional[LayoutGrid] = None) -> SchematicModel:
    model = SchematicModel(
        title=schematic_title(behavior),
        components=tuple(layout_components(components, grid or LayoutGrid())),
        wires=tuple(route_wires(connections)),
        power_rails=tuple(power_rails(components)),
        annotations=tuple(annotations(behavior, power)),
    )
    logger.info(f"[schematic] {model.title!r}: symbols={len(model.components)} wires={len(model.wires)}")
    return model
