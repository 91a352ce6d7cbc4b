# board_intel/summarize/power_flow.py
from __future__ import annotations
from typing import Callable, Dict, List, Sequence

from loguru import logger

from board_intel.schema.types import (
    ComponentCandidate, ComponentProperties, ComponentType, PowerProfile, SignalFlowProfile,
)

# milliwatts; coarse per-type guesses keyed on the property buckets
POWER_MW: Dict[ComponentType, Callable[[ComponentProperties], int]] = {
    ComponentType.IC: lambda p: 500 if (p.pin_count or 0) > 20 else 100,
    ComponentType.RESISTOR: lambda p: 1000 if p.power_rating == "1W+" else 250,
    ComponentType.TRANSISTOR: lambda p: 2000 if p.variant == "Power" else 100,
}
DEFAULT_MW = 10

def component_power_mw(comp: ComponentCandidate) -> int:
    fn = POWER_MW.get(comp.type)
    return fn(comp.properties) if fn else DEFAULT_MW

def estimate_power(components: Sequence[ComponentCandidate]) -> PowerProfile:
    total = sum(component_power_mw(c) for c in components)
    logger.info(f"[power] estimated total={total}mW")
    return PowerProfile(estimated_total_power_mw=total)

def connection_count(cid: str, connections: Sequence) -> int:
    return sum(1 for conn in connections if conn.involves(cid))

def estimate_signal_flow(components: Sequence[ComponentCandidate], connections: Sequence,
                         input_x_threshold: float = 200) -> SignalFlowProfile:
    """
    Exactly one connection: input stage left of the threshold, output stage otherwise.
    Anything else (zero or several connections) is a processing stage.
    """
    inputs: List[str] = []
    processing: List[str] = []
    outputs: List[str] = []
    for c in components:
        if connection_count(c.id, connections) == 1:
            (inputs if c.position[0] < input_x_threshold else outputs).append(c.id)
        else:
            processing.append(c.id)
    logger.info(f"[signal] inputs={len(inputs)} processing={len(processing)} outputs={len(outputs)}")
    return SignalFlowProfile(input_stages=tuple(inputs), processing_stages=tuple(processing),
                             output_stages=tuple(outputs))
