# board_intel/vision/classifier.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from loguru import logger

from board_intel.context import RunContext
from board_intel.schema.types import (
    ComponentCandidate, ComponentType, Discarded, GeometricPrimitive, TraceSegment,
)
from board_intel.vision.properties import estimate_properties
from board_intel.vision.templates import Template, load_templates


@dataclass(frozen=True)
class TraceRule:
    aspect_hi: float = 5.0
    aspect_lo: float = 0.2
    min_area: float = 100
    min_span: float = 100

    def matches(self, prim: GeometricPrimitive) -> bool:
        elongated = prim.aspect_ratio > self.aspect_hi or prim.aspect_ratio < self.aspect_lo
        return (elongated and prim.area > self.min_area
                and (prim.width > self.min_span or prim.height > self.min_span))


def match_template(area: float, aspect_ratio: float, circularity: float,
                   templates: Optional[Sequence[Template]] = None) -> Optional[Tuple[ComponentType, float]]:
    """First template (in priority order) whose three ranges all hold; not the best fit."""
    for t in (templates if templates is not None else load_templates()):
        if t.accepts(area, aspect_ratio, circularity):
            return t.type, t.confidence(area, aspect_ratio, circularity)
    return None


def classify_primitive(prim: GeometricPrimitive, ctx: RunContext,
                       templates: Optional[Sequence[Template]] = None,
                       trace_rule: TraceRule = TraceRule()) -> Union[ComponentCandidate, TraceSegment, Discarded]:
    hit = match_template(prim.area, prim.aspect_ratio, prim.circularity, templates)
    if hit is not None:
        ctype, conf = hit
        return ComponentCandidate(
            id=ctx.next_id("comp"),
            type=ctype,
            confidence=conf,
            position=prim.center,
            bbox=prim.bbox,
            properties=estimate_properties(ctype, prim.width, prim.height, prim.area),
        )
    if trace_rule.matches(prim):
        return TraceSegment(id=ctx.next_id("trace"), path=prim.points,
                            width=min(prim.width, prim.height))
    return Discarded(index=prim.index)


def classify_all(prims: Iterable[GeometricPrimitive], ctx: RunContext,
                 templates: Optional[Sequence[Template]] = None,
                 trace_rule: TraceRule = TraceRule()):
    """Split primitives into (components, traces, discarded_count)."""
    comps: List[ComponentCandidate] = []
    traces: List[TraceSegment] = []
    dropped = 0
    for p in prims:
        r = classify_primitive(p, ctx, templates, trace_rule)
        if isinstance(r, ComponentCandidate):
            comps.append(r)
        elif isinstance(r, TraceSegment):
            traces.append(r)
        else:
            dropped += 1
            logger.debug(f"[classify] contour #{p.index} discarded (area={p.area:.0f}, "
                         f"ar={p.aspect_ratio:.2f}, circ={p.circularity:.2f})")
    logger.info(f"[classify] components={len(comps)} traces={len(traces)} discarded={dropped}")
    return comps, traces, dropped
