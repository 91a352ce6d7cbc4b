from typing import Dict, List, Sequence, Tuple
from dataclasses import dataclass
import math
from loguru import logger

from board_intel.schema.types import (
    ComponentCandidate, ComponentComponentEdge, ComponentTraceEdge, Coord, TraceSegment,
)

@dataclass(frozen=True)
class CopperModel:
    """Assumed geometry per shared trace; nothing here is measured from the image."""
    assumed_length_mm: float = 100.0
    assumed_width_mm: float = 0.2
    resistivity_ohm_m: float = 1.7e-8
    copper_thickness_m: float = 35e-6

    def resistance(self, n_traces: int) -> float:
        if n_traces <= 0:
            return 0.0
        total_length = self.assumed_length_mm * n_traces
        avg_width = self.assumed_width_mm  # every trace assumes the same width
        return (self.resistivity_ohm_m * (total_length * 1e-3)) / (avg_width * 1e-3 * self.copper_thickness_m)

def _dist(a: Coord, b: Coord) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])

def touches(comp: ComponentCandidate, trace: TraceSegment, threshold_px: float = 50) -> bool:
    return any(_dist(p, comp.position) < threshold_px for p in trace.path)

def nearest_point(comp: ComponentCandidate, trace: TraceSegment) -> Coord:
    # first point wins ties
    return min(trace.path, key=lambda p: _dist(p, comp.position))

def component_trace_edges(components: Sequence[ComponentCandidate], traces: Sequence[TraceSegment],
                          threshold_px: float = 50) -> List[ComponentTraceEdge]:
    out = []
    for c in components:
        for t in traces:
            if t.path and touches(c, t, threshold_px):
                out.append(ComponentTraceEdge(component=c.id, trace=t.id,
                                              connection_point=nearest_point(c, t)))
    return out

def component_component_edges(components: Sequence[ComponentCandidate],
                              ct_edges: Sequence[ComponentTraceEdge],
                              model: CopperModel = CopperModel()) -> List[ComponentComponentEdge]:
    """
    One edge per unordered component pair sharing at least one trace.
    O(n²) in component count.
    """
    attached: Dict[str, List[str]] = {c.id: [] for c in components}
    for e in ct_edges:
        attached.setdefault(e.component, []).append(e.trace)

    out = []
    for i, a in enumerate(components):
        ta = attached[a.id]
        for b in components[i + 1:]:
            tb = set(attached[b.id])
            shared = tuple(t for t in ta if t in tb)
            if shared:
                out.append(ComponentComponentEdge(
                    component1=a.id, component2=b.id, via=shared,
                    estimated_resistance=model.resistance(len(shared)),
                ))
    return out

def resolve_connections(components: Sequence[ComponentCandidate], traces: Sequence[TraceSegment],
                        threshold_px: float = 50, model: CopperModel = CopperModel()
                        ) -> Tuple[ComponentTraceEdge | ComponentComponentEdge, ...]:
    """Component↔trace edges first, then the component↔component edges they imply."""
    ct = component_trace_edges(components, traces, threshold_px)
    cc = component_component_edges(components, ct, model)
    logger.info(f"[connectivity] component-trace={len(ct)} component-component={len(cc)}")
    return tuple(ct) + tuple(cc)
