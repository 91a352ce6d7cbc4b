from pathlib import Path
from typing import List, Dict, Any
import io
from svgelements import SVG, Group, Polyline, Text

def _load(source) -> SVG:
    """Accept an SVG string, bytes, or a path to an .svg file."""
    if isinstance(source, bytes):
        return SVG.parse(io.BytesIO(source))
    if isinstance(source, str) and source.lstrip().startswith("<"):
        return SVG.parse(io.BytesIO(source.encode("utf-8")))
    p = Path(source)
    if not p.exists():
        raise FileNotFoundError(p)
    return SVG.parse(str(p))

def parse_schematic_svg(source) -> Dict[str, Any]:
    """
    Read back an exported schematic.
    Returns {title, components:[{id,type,symbol,label,value,position,size}],
             wires:[{id,net,points}], annotations:[text]} with transforms applied.
    """
    svg = _load(source)
    title = None
    comps: List[Dict[str, Any]] = []
    wires: List[Dict[str, Any]] = []
    notes: List[str] = []
    for el in svg.elements():
        cls = el.values.get("class")
        if isinstance(el, Group) and cls == "component":
            m = el.transform
            comps.append({
                "id": el.values.get("id"),
                "type": el.values.get("data-type"),
                "symbol": el.values.get("data-symbol"),
                "label": el.values.get("data-label"),
                "value": el.values.get("data-value") or "",
                "position": (round(float(m.e), 3), round(float(m.f), 3)),
                "size": (float(el.values.get("data-width", 0)), float(el.values.get("data-height", 0))),
            })
        elif isinstance(el, Polyline) and cls == "wire":
            wires.append({
                "id": el.values.get("id"),
                "net": el.values.get("data-net"),
                "points": [(round(float(p.x), 3), round(float(p.y), 3)) for p in el.points],
            })
        elif isinstance(el, Text):
            if cls == "title":
                title = (el.text or "").strip()
            elif cls == "annotation":
                notes.append((el.text or "").strip())
    return {"title": title, "components": comps, "wires": wires, "annotations": notes}
