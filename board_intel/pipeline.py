# board_intel/pipeline.py
"""
End-to-end analysis of one board image.

extract primitives → classify → resolve connections → netlist → behavior →
power / signal flow → schematic. Each run owns a fresh RunContext, so ids
never leak between images. A decode or preprocessing failure aborts the
whole run; nothing partial is returned.
"""
from __future__ import annotations
import asyncio
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from board_intel.config.loader import load_cfg
from board_intel.context import RunContext
from board_intel.cv.contours import extract_primitives
from board_intel.geometry.connectivity import CopperModel, resolve_connections
from board_intel.schema.types import AnalysisResult, AnalysisSummary, CircuitAnalysis
from board_intel.schematic.layout import LayoutGrid, synthesize_schematic
from board_intel.stitching.build_nets import build_netlist
from board_intel.summarize.behavior import classify_behavior
from board_intel.summarize.power_flow import estimate_power, estimate_signal_flow
from board_intel.utils.image import check_rgba, open_rgba
from board_intel.utils.timers import timer
from board_intel.vision.classifier import TraceRule, classify_all
from board_intel.vision.templates import load_templates


def _stage_kwargs_from_cfg(cfg: DictConfig) -> Dict[str, Any]:
    """Translate the config tree into the keyword arguments each stage takes."""
    c = OmegaConf.to_container(cfg, resolve=True)
    ex, cl, co, sc = c["extractor"], c["classifier"], c["connectivity"], c["schematic"]
    return {
        "extractor": dict(ex),
        "templates": load_templates(cl.get("templates_file", "component_templates.yml")),
        "trace_rule": TraceRule(**cl.get("trace", {})),
        "threshold_px": float(co["threshold_px"]),
        "copper": CopperModel(**co.get("resistance", {})),
        "input_x_threshold": float(c["signal_flow"]["input_x_threshold"]),
        "grid": LayoutGrid(origin=tuple(sc["origin"]), gap_x=sc["gap_x"],
                           row_gap=sc["row_gap"], max_row_x=sc["max_row_x"]),
    }


def summarize(comps, behavior, power) -> AnalysisSummary:
    return AnalysisSummary(
        component_count=len(comps),
        type_count=len({c.type for c in comps}),
        functions=behavior.estimated_function,
        circuit_type=behavior.circuit_type,
        total_power_mw=power.estimated_total_power_mw,
    )


def analyze_image(rgba: np.ndarray, cfg: Optional[DictConfig] = None) -> AnalysisResult:
    """Run every stage over a decoded (height, width, 4) uint8 buffer."""
    check_rgba(rgba)
    cfg = cfg if cfg is not None else load_cfg()
    kw = _stage_kwargs_from_cfg(cfg)
    ctx = RunContext()
    h, w = rgba.shape[:2]

    with timer("extract"):
        prims = extract_primitives(rgba, **kw["extractor"])
    with timer("classify"):
        comps, traces, dropped = classify_all(prims, ctx, kw["templates"], kw["trace_rule"])
    with timer("connectivity"):
        connections = resolve_connections(comps, traces, kw["threshold_px"], kw["copper"])
    with timer("netlist"):
        netlist = build_netlist(comps, connections, ctx)
    with timer("behavior"):
        behavior = classify_behavior(comps)
        power = estimate_power(comps)
        flow = estimate_signal_flow(comps, connections, kw["input_x_threshold"])
    with timer("schematic"):
        schematic = synthesize_schematic(comps, connections, behavior, power, kw["grid"])

    summary = summarize(comps, behavior, power)
    logger.info(f"[pipeline] {w}x{h}: components={summary.component_count} "
                f"types={summary.type_count} traces={len(traces)} power={summary.total_power_mw}mW")
    return AnalysisResult(
        width=w,
        height=h,
        components=tuple(comps),
        traces=tuple(traces),
        analysis=CircuitAnalysis(connections=connections, netlist=netlist, behavior=behavior,
                                 power=power, signal_flow=flow),
        schematic=schematic,
        summary=summary,
        discarded=dropped,
    )


def analyze_file(path: str | Path, cfg: Optional[DictConfig] = None) -> AnalysisResult:
    return analyze_image(open_rgba(path), cfg)


async def analyze_async(rgba: np.ndarray, cfg: Optional[DictConfig] = None) -> AnalysisResult:
    """The whole run as one unit of work in a worker thread."""
    return await asyncio.to_thread(analyze_image, rgba, cfg)
