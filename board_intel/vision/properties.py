# board_intel/vision/properties.py
"""Coarse, explicitly approximate property guesses from blob size and shape.

Every label is a bucket, not a measurement: a resistor's footprint says
something about its power class and nothing about its resistance.
"""
from __future__ import annotations
import math
from typing import Callable, Dict

from board_intel.schema.types import ComponentProperties, ComponentType


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _bucket(v: float, steps, last: str) -> str:
    for limit, label in steps:
        if v < limit:
            return label
    return last


def resistor_value(area: float) -> str:
    return _bucket(math.sqrt(area), [(20, "1/8W (100Ω - 1kΩ)"), (40, "1/4W (1kΩ - 10kΩ)")],
                   "1/2W (10kΩ - 100kΩ)")

def resistor_power_rating(area: float) -> str:
    return _bucket(area, [(300, "1/8W"), (600, "1/4W"), (1200, "1/2W")], "1W+")

def capacitance(area: float) -> str:
    return _bucket(math.sqrt(area), [(25, "1pF - 100pF"), (50, "100pF - 1µF")], "1µF - 1000µF")

def capacitor_voltage(area: float) -> str:
    return _bucket(area, [(200, "16V"), (500, "25V"), (1000, "50V")], "100V+")

def ic_pin_count(width: float, height: float) -> int:
    return _round_half_up(2 * (width + height) / 10)

def ic_package(width: float, height: float) -> str:
    ar = width / height if height else 0.0
    if ar > 2 or ar < 0.5:
        return "SOP"
    return "DIP" if width > 50 else "SMD"


def _resistor(w, h, area):
    return ComponentProperties(estimated_value=resistor_value(area),
                               power_rating=resistor_power_rating(area))

def _capacitor(w, h, area):
    return ComponentProperties(estimated_capacitance=capacitance(area),
                               voltage=capacitor_voltage(area))

def _ic(w, h, area):
    return ComponentProperties(pin_count=ic_pin_count(w, h), package=ic_package(w, h))

def _diode(w, h, area):
    return ComponentProperties(variant="Standard", estimated_voltage="0.7V")

def _transistor(w, h, area):
    wide = w > h
    return ComponentProperties(variant="Power" if wide else "Signal",
                               package="TO-220" if wide else "TO-92")


ESTIMATORS: Dict[ComponentType, Callable[[float, float, float], ComponentProperties]] = {
    ComponentType.RESISTOR: _resistor,
    ComponentType.CAPACITOR: _capacitor,
    ComponentType.IC: _ic,
    ComponentType.DIODE: _diode,
    ComponentType.TRANSISTOR: _transistor,
}


def estimate_properties(ctype: ComponentType, width: float, height: float, area: float) -> ComponentProperties:
    fn = ESTIMATORS.get(ctype)
    return fn(width, height, area) if fn else ComponentProperties()
