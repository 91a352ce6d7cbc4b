"""SVG export and re-parse of the schematic model."""

from board_intel.parsers.svg_parse import parse_schematic_svg
from board_intel.schema.types import (
    CircuitBehaviorProfile, ComponentCandidate, ComponentComponentEdge, ComponentProperties, ComponentType,
    ControlLogicProfile, PowerProfile, PowerSupplyProfile, SignalProcessingProfile,
)
from board_intel.schematic.layout import synthesize_schematic
from board_intel.schematic.svg import SchematicRenderer, export_svg

KINDS = [ComponentType.RESISTOR, ComponentType.CAPACITOR, ComponentType.IC, ComponentType.DIODE,
         ComponentType.TRANSISTOR, ComponentType.INDUCTOR, ComponentType.CONNECTOR,
         ComponentType.RESISTOR, ComponentType.CAPACITOR]


def schematic():
    comps = []
    for i, t in enumerate(KINDS):
        props = {"estimated_value": "1/4W (1kΩ - 10kΩ)"} if t is ComponentType.RESISTOR else {}
        if t is ComponentType.IC:
            props = {"pin_count": 14}
        comps.append(ComponentCandidate(id=f"comp_{i}", type=t, confidence=0.5, position=(0.0, 0.0),
                                        bbox=(0, 0, 1, 1), properties=ComponentProperties(**props)))
    conns = [ComponentComponentEdge(component1="comp_0", component2="comp_1", via=("trace_0",),
                                    estimated_resistance=0.24)]
    behavior = CircuitBehaviorProfile(
        circuit_type="Digital/Mixed Signal", estimated_function=("Signal Filtering",),
        power_supply=PowerSupplyProfile(type="External Power", estimated_voltage="Unknown"),
        signal_processing=SignalProcessingProfile(type="None detected"),
        control_logic=ControlLogicProfile(type="None detected"),
    )
    return synthesize_schematic(comps, conns, behavior, PowerProfile(estimated_total_power_mw=930))


def test_positions_sizes_labels_survive():
    s = schematic()
    parsed = parse_schematic_svg(export_svg(s))
    by_id = {c["id"]: c for c in parsed["components"]}
    assert len(by_id) == len(s.components)
    for pc in s.components:
        got = by_id[pc.id]
        assert got["position"] == pc.position
        assert got["size"] == pc.size
        assert got["label"] == pc.label
        assert got["type"] == pc.type.value
        assert got["value"] == pc.value


def test_wires_title_and_annotations():
    s = schematic()
    parsed = parse_schematic_svg(export_svg(s))
    assert parsed["title"] == "Filter Circuit"
    assert [w["id"] for w in parsed["wires"]] == ["wire_0"]
    assert parsed["wires"][0]["points"] == [(0, 0), (100, 0), (100, 50), (200, 50)]
    assert parsed["annotations"][1] == "Estimated Power: 930mW"


def test_document_shape():
    doc = SchematicRenderer(schematic(), draw_grid=False).render_svg()
    assert doc.startswith("<svg")
    assert 'viewBox="0 0 1000 800"' in doc
    assert 'class="grid"' not in doc
    assert "VCC (+5V)" in doc and "GND (0V)" in doc
    assert doc.count('class="component"') == len(KINDS)


def test_written_file_parses(tmp_path):
    s = schematic()
    out = tmp_path / "nested" / "schematic.svg"
    export_svg(s, out)
    parsed = parse_schematic_svg(out)
    assert len(parsed["components"]) == len(s.components)
