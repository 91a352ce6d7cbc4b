from typing import Dict, Any, Sequence
import networkx as nx
from loguru import logger

from board_intel.schema.types import (
    ComponentCandidate, TraceSegment, ComponentTraceEdge, ComponentComponentEdge, Netlist,
)

def build_connectivity_graph(components: Sequence[ComponentCandidate],
                             traces: Sequence[TraceSegment],
                             connections: Sequence,
                             width: int = 0, height: int = 0) -> nx.Graph:
    """
    Components and traces as nodes; component-trace edges attach a part to a
    copper run, component-component edges carry the shared traces and the
    estimated resistance.
    """
    G = nx.Graph(width=width, height=height)

    for c in components:
        G.add_node(f"comp:{c.id}",
                   kind="component",
                   comp_id=c.id,
                   type=c.type.value,
                   confidence=float(c.confidence),
                   bbox=list(c.bbox),
                   x=float(c.position[0]), y=float(c.position[1]),
                   value=c.properties.estimated_value)

    for t in traces:
        G.add_node(f"trace:{t.id}", kind="trace", trace_id=t.id,
                   width=float(t.width), points=len(t.path))

    for conn in connections:
        if isinstance(conn, ComponentTraceEdge):
            G.add_edge(f"comp:{conn.component}", f"trace:{conn.trace}",
                       kind="component-trace",
                       connection_point=list(conn.connection_point))
        elif isinstance(conn, ComponentComponentEdge):
            G.add_edge(f"comp:{conn.component1}", f"comp:{conn.component2}",
                       kind="component-component",
                       via=list(conn.via),
                       estimated_resistance=conn.estimated_resistance)

    logger.info(f"[graph.build] nodes={G.number_of_nodes()} edges={G.number_of_edges()}")
    return G

def assign_net_ids(G: nx.Graph, netlist: Netlist) -> None:
    """Tag trace nodes and their attached components with the NET id of the trace."""
    by_trace: Dict[str, Any] = {n.trace: n.id for n in netlist.nets}
    for node, attrs in G.nodes(data=True):
        if attrs.get("kind") != "trace":
            continue
        net_id = by_trace.get(attrs["trace_id"])
        if net_id is None:
            continue
        attrs["net_id"] = net_id
        for nbr in G.neighbors(node):
            nets = G.nodes[nbr].setdefault("nets", [])
            if net_id not in nets:
                nets.append(net_id)
