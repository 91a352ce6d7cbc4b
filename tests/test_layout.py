"""Schematic placement, pins, wires, rails and callouts."""

from board_intel.schema.types import (
    CircuitBehaviorProfile, ComponentCandidate, ComponentComponentEdge, ComponentProperties,
    ComponentTraceEdge, ComponentType, ControlLogicProfile, PowerProfile, PowerSupplyProfile,
    SignalProcessingProfile,
)
from board_intel.schematic.layout import (
    LayoutGrid, SYMBOL_LIBRARY, Symbol, component_label, generate_pins, layout_components,
    route_wires, synthesize_schematic,
)


def part(cid, t, **props):
    return ComponentCandidate(id=cid, type=t, confidence=0.5, position=(0.0, 0.0), bbox=(0, 0, 1, 1),
                              properties=ComponentProperties(**props))


def behavior(functions=("Signal Filtering",)):
    return CircuitBehaviorProfile(
        circuit_type="General Purpose", estimated_function=functions,
        power_supply=PowerSupplyProfile(type="External Power", estimated_voltage="Unknown"),
        signal_processing=SignalProcessingProfile(type="None detected"),
        control_logic=ControlLogicProfile(type="None detected"),
    )


def test_type_order_then_input_order():
    comps = [part("comp_0", ComponentType.RESISTOR), part("comp_1", ComponentType.IC, pin_count=8),
             part("comp_2", ComponentType.RESISTOR), part("comp_3", ComponentType.CONNECTOR)]
    placed = layout_components(comps)
    assert [p.id for p in placed] == ["comp_3", "comp_1", "comp_0", "comp_2"]
    assert placed[0].position == (100, 100)
    assert placed[1].position == (100 + 40 + 50, 100)


def test_row_positions_never_overlap_before_wrap():
    comps = [part(f"comp_{i}", ComponentType.RESISTOR) for i in range(12)]
    placed = layout_components(comps)
    rows = {}
    for p in placed:
        rows.setdefault(p.position[1], []).append(p)
    for row in rows.values():
        for left, right in zip(row, row[1:]):
            assert left.position[0] + left.size[0] < right.position[0]


def test_wrap_after_column_budget():
    # resistors advance 110 each: 100, 210, ... 760, 870 > 800 wraps
    comps = [part(f"comp_{i}", ComponentType.RESISTOR) for i in range(8)]
    placed = layout_components(comps)
    assert [p.position[1] for p in placed[:7]] == [100] * 7
    assert placed[7].position == (100, 100 + 20 + 80)


def test_custom_grid():
    placed = layout_components([part("comp_0", ComponentType.DIODE)], LayoutGrid(origin=(10, 20)))
    assert placed[0].position == (10, 20)
    assert placed[0].size == (40, 30)


def test_pin_layouts():
    two = generate_pins(2, SYMBOL_LIBRARY["resistor"])
    assert [(p.position, p.side) for p in two] == [((0, 10), "left"), ((60, 10), "right")]
    three = generate_pins(3, SYMBOL_LIBRARY["transistor"])
    assert [p.label for p in three] == ["B", "C", "E"]
    eight = generate_pins(8, Symbol(80, 60, "variable"))
    assert [p.side for p in eight] == ["left"] * 4 + ["right"] * 4
    assert [p.id for p in eight] == list(range(1, 9))
    five = generate_pins(5, Symbol(80, 60, "variable"))
    assert len(five) == 5


def test_variable_pins_default_to_eight():
    placed = layout_components([part("comp_0", ComponentType.IC)])
    assert len(placed[0].pins) == 8


def test_labels():
    assert component_label(part("comp_4", ComponentType.RESISTOR)) == "R4"
    assert component_label(part("comp_4", ComponentType.CONNECTOR)) == "J4"
    assert component_label(part("x", ComponentType.IC)) == "U1"


def test_wires_only_for_component_pairs():
    conns = [ComponentTraceEdge(component="comp_0", trace="trace_0", connection_point=(0.0, 0.0)),
             ComponentComponentEdge(component1="comp_0", component2="comp_1", via=("trace_0",),
                                    estimated_resistance=0.24)]
    wires = route_wires(conns)
    assert len(wires) == 1
    w = wires[0]
    assert (w.id, w.net_name) == ("wire_1", "NET_1")
    assert (w.source.component, w.source.pin, w.target.component, w.target.pin) == ("comp_0", 1, "comp_1", 1)
    assert w.routed is False


def test_synthesized_model():
    comps = [part("comp_0", ComponentType.IC, pin_count=8), part("comp_1", ComponentType.CAPACITOR),
             part("comp_2", ComponentType.TRANSISTOR)]
    s = synthesize_schematic(comps, [], behavior(("Voltage Regulation", "Signal Filtering")),
                             PowerProfile(estimated_total_power_mw=210))
    assert s.title == "Power Supply Circuit"
    vcc, gnd = s.power_rails
    assert (vcc.name, vcc.voltage, vcc.color, vcc.y) == ("VCC", "+5V", "#FF0000", 70)
    assert (gnd.name, gnd.voltage, gnd.color, gnd.y) == ("GND", "0V", "#000000", 750)
    assert vcc.members == ("comp_0", "comp_2")
    assert gnd.members == ("comp_0", "comp_1")
    texts = [a.text for a in s.annotations]
    assert texts == ["Circuit Function: Voltage Regulation, Signal Filtering",
                     "Estimated Power: 210mW", "Type: General Purpose"]
    assert s.annotations[0].font_size == 14 and s.annotations[0].font_weight == "bold"


def test_title_fallback():
    s = synthesize_schematic([], [], behavior(("Unknown Function",)), PowerProfile(estimated_total_power_mw=0))
    assert s.title == "Electronic Circuit"
    assert s.components == ()
