"""Component/trace proximity and shared-trace edges."""

import pytest

from board_intel.geometry.connectivity import (
    CopperModel, component_component_edges, nearest_point, resolve_connections, touches,
)
from board_intel.schema.types import (
    ComponentCandidate, ComponentComponentEdge, ComponentTraceEdge, ComponentType, TraceSegment,
)


def comp(cid, x, y, t=ComponentType.RESISTOR):
    return ComponentCandidate(id=cid, type=t, confidence=0.5, position=(x, y),
                              bbox=(x - 10, y - 5, x + 10, y + 5))


def trace(tid, *pts):
    return TraceSegment(id=tid, path=tuple(pts), width=4)


def test_strictly_closer_than_threshold():
    t = trace("trace_0", (100.0, 0.0), (300.0, 0.0))
    assert touches(comp("c", 100, 49.9), t)
    assert not touches(comp("c", 100, 50), t)


def test_nearest_point_first_wins_ties():
    t = trace("trace_0", (0.0, 10.0), (0.0, -10.0))
    assert nearest_point(comp("c", 0, 0), t) == (0.0, 10.0)


def test_two_parts_on_one_trace():
    a, b = comp("comp_0", 80, 30), comp("comp_1", 420, 30)
    t = trace("trace_0", (100.0, 0.0), (400.0, 0.0))
    conns = resolve_connections([a, b], [t])
    ct = [c for c in conns if isinstance(c, ComponentTraceEdge)]
    cc = [c for c in conns if isinstance(c, ComponentComponentEdge)]
    assert [(e.component, e.trace) for e in ct] == [("comp_0", "trace_0"), ("comp_1", "trace_0")]
    assert ct[0].connection_point == (100.0, 0.0)
    assert len(cc) == 1
    assert (cc[0].component1, cc[0].component2, cc[0].via) == ("comp_0", "comp_1", ("trace_0",))


def test_component_trace_edges_come_first():
    a, b = comp("comp_0", 0, 0), comp("comp_1", 10, 0)
    conns = resolve_connections([a, b], [trace("trace_0", (5.0, 5.0))])
    kinds = [c.kind for c in conns]
    assert kinds == ["component-trace", "component-trace", "component-component"]


def test_no_shared_trace_no_edge():
    a, b = comp("comp_0", 0, 0), comp("comp_1", 1000, 0)
    conns = resolve_connections([a, b], [trace("trace_0", (0.0, 10.0)), trace("trace_1", (1000.0, 10.0))])
    assert not any(isinstance(c, ComponentComponentEdge) for c in conns)


def test_resistance_scales_with_shared_traces():
    m = CopperModel()
    one = m.resistance(1)
    # 1.7e-8 * 0.1 m / (0.2e-3 m * 35e-6 m)
    assert one == pytest.approx(0.242857, rel=1e-4)
    assert m.resistance(2) == pytest.approx(2 * one)
    assert m.resistance(0) == 0.0


def test_edge_carries_resistance():
    a, b = comp("comp_0", 0, 0), comp("comp_1", 10, 0)
    ts = [trace("trace_0", (5.0, 5.0)), trace("trace_1", (5.0, -5.0))]
    conns = resolve_connections([a, b], ts)
    cc = [c for c in conns if isinstance(c, ComponentComponentEdge)]
    assert cc[0].via == ("trace_0", "trace_1")
    assert cc[0].estimated_resistance == pytest.approx(CopperModel().resistance(2))


def test_empty_inputs():
    assert resolve_connections([], []) == ()
    assert component_component_edges([], []) == []
