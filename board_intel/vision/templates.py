# board_intel/vision/templates.py
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from board_intel.resources import load_template_catalog
from board_intel.schema.types import ComponentType


@dataclass(frozen=True)
class Range:
    lo: float
    hi: float

    def __contains__(self, v: float) -> bool:
        return self.lo <= v <= self.hi

    @property
    def mid(self) -> float:
        return (self.lo + self.hi) / 2.0

    def closeness(self, v: float) -> float:
        """1.0 at the midpoint, 0.0 at either edge, linear in between."""
        half = (self.hi - self.lo) / 2.0
        if half <= 0:
            return 1.0 if v == self.lo else 0.0
        return 1.0 - abs(v - self.mid) / half


@dataclass(frozen=True)
class Template:
    type: ComponentType
    area: Range
    aspect_ratio: Range
    circularity: Range

    def accepts(self, area: float, aspect_ratio: float, circularity: float) -> bool:
        return area in self.area and aspect_ratio in self.aspect_ratio and circularity in self.circularity

    def confidence(self, area: float, aspect_ratio: float, circularity: float) -> float:
        score = (self.area.closeness(area)
                 + self.aspect_ratio.closeness(aspect_ratio)
                 + self.circularity.closeness(circularity)) / 3.0
        return max(0.0, min(1.0, score))


def _range(pair) -> Range:
    lo, hi = pair
    return Range(float(lo), float(hi))


def templates_from_catalog(catalog: dict) -> Tuple[Template, ...]:
    """Catalog key order is the evaluation priority."""
    return tuple(
        Template(type=ComponentType.from_key(key),
                 area=_range(ranges["area"]),
                 aspect_ratio=_range(ranges["aspect_ratio"]),
                 circularity=_range(ranges["circularity"]))
        for key, ranges in catalog.items()
    )


@lru_cache(maxsize=8)
def load_templates(name: str = "component_templates.yml") -> Tuple[Template, ...]:
    return templates_from_catalog(load_template_catalog(name))
