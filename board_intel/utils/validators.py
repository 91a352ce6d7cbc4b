# cross-reference checks over an AnalysisResult
# board_intel/utils/validators.py
from __future__ import annotations
from typing import List

from board_intel.schema.types import AnalysisResult, ComponentComponentEdge, ComponentTraceEdge

def check_referential_closure(result: AnalysisResult) -> List[str]:
    """Every id mentioned by connections, nets, netlist and schematic must exist. Returns error strings."""
    err = []
    comp_ids = {c.id for c in result.components}
    trace_ids = {t.id for t in result.traces}
    a = result.analysis

    for conn in a.connections:
        if isinstance(conn, ComponentTraceEdge):
            if conn.component not in comp_ids: err.append(f"connection: unknown component {conn.component}")
            if conn.trace not in trace_ids: err.append(f"connection: unknown trace {conn.trace}")
        elif isinstance(conn, ComponentComponentEdge):
            for cid in (conn.component1, conn.component2):
                if cid not in comp_ids: err.append(f"connection: unknown component {cid}")
            for tid in conn.via:
                if tid not in trace_ids: err.append(f"connection: unknown trace {tid}")

    net_ids = set()
    for net in a.netlist.nets:
        net_ids.add(net.id)
        if net.trace not in trace_ids: err.append(f"{net.id}: unknown trace {net.trace}")
        for cid in net.components:
            if cid not in comp_ids: err.append(f"{net.id}: unknown component {cid}")

    pair_ids = {c.pair_id for c in a.connections if isinstance(c, ComponentComponentEdge)}
    for entry in a.netlist.components:
        if entry.id not in comp_ids: err.append(f"netlist: unknown component {entry.id}")
        for pin in entry.pins:
            if pin.net not in net_ids and pin.net not in pair_ids:
                err.append(f"netlist {entry.id}: pin {pin.pin} on unknown net {pin.net}")

    flow = a.signal_flow
    for cid in (*flow.input_stages, *flow.processing_stages, *flow.output_stages):
        if cid not in comp_ids: err.append(f"signal flow: unknown component {cid}")

    s = result.schematic
    for pc in s.components:
        if pc.id not in comp_ids: err.append(f"schematic: unknown component {pc.id}")
    for w in s.wires:
        for end in (w.source, w.target):
            if end.component not in comp_ids: err.append(f"{w.id}: unknown component {end.component}")
    for rail in s.power_rails:
        for cid in rail.members:
            if cid not in comp_ids: err.append(f"rail {rail.name}: unknown component {cid}")
    return err
