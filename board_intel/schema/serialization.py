# board_intel/schema/serialization.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import pandas as pd

from board_intel.schema.types import AnalysisResult
from board_intel.utils.io import read_json, write_json

CSV_COLUMNS = [
    "id", "type", "confidence", "x", "y", "bbox_x0", "bbox_y0", "bbox_x1", "bbox_y1",
    "width", "height", "value", "pins", "power_rating", "package",
]

def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    return result.model_dump(mode="json")

def write_result_json(result: AnalysisResult, path) -> Path:
    return write_json(result_to_dict(result), path)

def load_result_json(path) -> AnalysisResult:
    return AnalysisResult.model_validate(read_json(path))

def component_rows(result: AnalysisResult) -> List[Dict[str, Any]]:
    """One flat row per detected component, joined with its netlist value and pin count."""
    entries = {e.id: e for e in result.analysis.netlist.components}
    rows = []
    for c in result.components:
        x1, y1, x2, y2 = c.bbox
        entry = entries.get(c.id)
        rows.append({
            "id": c.id,
            "type": c.type.value,
            "confidence": round(c.confidence, 4),
            "x": c.position[0], "y": c.position[1],
            "bbox_x0": x1, "bbox_y0": y1, "bbox_x1": x2, "bbox_y1": y2,
            "width": x2 - x1, "height": y2 - y1,
            "value": entry.value if entry else "Unknown",
            "pins": len(entry.pins) if entry else 0,
            "power_rating": c.properties.power_rating,
            "package": c.properties.package,
        })
    return rows

def export_components_csv(result: AnalysisResult, path) -> str:
    """Write a tidy components CSV and return its path."""
    df = pd.DataFrame(component_rows(result), columns=CSV_COLUMNS)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, index=False)
    return str(out)
