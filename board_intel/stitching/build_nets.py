# board_intel/stitching/build_nets.py
from __future__ import annotations
from typing import Dict, List, Sequence

from loguru import logger

from board_intel.context import RunContext
from board_intel.schema.types import (
    ComponentCandidate, ComponentTraceEdge, Net, Netlist, NetlistEntry, Pin,
)

def extract_nets(connections: Sequence, ctx: RunContext) -> List[Net]:
    """
    Group component-trace edges by trace id, in first-seen order.
    Traces without an attached component never appear here, so they yield no net.
    """
    order: List[str] = []
    members: Dict[str, List[str]] = {}
    for conn in connections:
        if not isinstance(conn, ComponentTraceEdge):
            continue
        if conn.trace not in members:
            order.append(conn.trace)
            members[conn.trace] = []
        members[conn.trace].append(conn.component)
    return [Net(id=ctx.next_id("NET"), trace=tid, components=tuple(members[tid])) for tid in order]

def component_pins(comp: ComponentCandidate, connections: Sequence, net_by_trace: Dict[str, str]) -> List[Pin]:
    """
    One pin per touching edge, numbered from 1.
    Pin count is the connection degree, not the physical pin count.
    """
    pins = []
    for conn in connections:
        if not conn.involves(comp.id):
            continue
        if isinstance(conn, ComponentTraceEdge):
            ref = net_by_trace[conn.trace]
        else:
            ref = conn.pair_id
        pins.append(Pin(pin=len(pins) + 1, net=ref))
    return pins

def build_netlist(components: Sequence[ComponentCandidate], connections: Sequence,
                  ctx: RunContext) -> Netlist:
    nets = extract_nets(connections, ctx)
    net_by_trace = {n.trace: n.id for n in nets}
    entries = tuple(
        NetlistEntry(id=c.id, type=c.type, value=c.value_label() or "Unknown",
                     pins=tuple(component_pins(c, connections, net_by_trace)))
        for c in components
    )
    logger.info(f"[netlist] entries={len(entries)} nets={len(nets)}")
    return Netlist(components=entries, nets=tuple(nets))
