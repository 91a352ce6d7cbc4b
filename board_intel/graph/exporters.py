from pathlib import Path
import networkx as nx
from loguru import logger
from board_intel.utils.io import write_json, ensure_dir

GRAPHML_SCALARS = (bool, int, float, str)

def graphml_value(v):
    if v is None:
        return ""
    if isinstance(v, GRAPHML_SCALARS):
        return v
    if isinstance(v, (list, tuple)):
        return ",".join(map(str, v))
    return str(v)

def graphml_safe(G: nx.Graph) -> nx.Graph:
    """Copy of G whose graph/node/edge attributes are GraphML scalars only."""
    safe = nx.Graph(**{k: graphml_value(v) for k, v in G.graph.items()})
    safe.add_nodes_from((n, {k: graphml_value(v) for k, v in a.items()}) for n, a in G.nodes(data=True))
    safe.add_edges_from((u, v, {k: graphml_value(x) for k, x in a.items()}) for u, v, a in G.edges(data=True))
    return safe

def graph_payload(G: nx.Graph) -> dict:
    return {
        "graph_attrs": dict(G.graph),
        "nodes": [dict(id=n, **attrs) for n, attrs in G.nodes(data=True)],
        "edges": [dict(u=u, v=v, **attrs) for u, v, attrs in G.edges(data=True)],
    }

def export_graph(G: nx.Graph, out_dir, stem: str = "graph", write_graphml: bool = True) -> dict:
    """
    <stem>.json is always written and is authoritative; <stem>.graphml is
    best effort and a failure only logs a warning.
    Returns {"json": path, "graphml": path or None}.
    """
    out_dir = ensure_dir(out_dir)
    written = {"json": write_json(graph_payload(G), out_dir / f"{stem}.json"), "graphml": None}
    if write_graphml:
        target = out_dir / f"{stem}.graphml"
        try:
            nx.write_graphml(graphml_safe(G), target)
            written["graphml"] = target
        except Exception as e:
            logger.warning(f"[graph.export] no GraphML for {stem}: {e}; use {written['json']}")
    logger.info(f"[graph.export] nodes={G.number_of_nodes()} edges={G.number_of_edges()} -> {out_dir}")
    return written
