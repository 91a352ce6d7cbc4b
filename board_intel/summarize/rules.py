# board_intel/summarize/rules.py
"""Declarative predicate/label rules over a typed count summary of the board."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Sequence, Tuple, TypeVar

from board_intel.schema.types import ComponentCandidate, ComponentType

T = TypeVar("T")

R, C, IC = ComponentType.RESISTOR, ComponentType.CAPACITOR, ComponentType.IC
D, Q, L = ComponentType.DIODE, ComponentType.TRANSISTOR, ComponentType.INDUCTOR


@dataclass(frozen=True)
class ComponentCensus:
    """Ids per type plus the property-derived groups the rules ask about.

    Every tuple keeps the input component order.
    """
    by_type: Dict[ComponentType, Tuple[str, ...]]
    regulator_ics: Tuple[str, ...]      # IC with pin_count <= 8
    logic_ics: Tuple[str, ...]          # IC with pin_count > 8
    pf_capacitors: Tuple[str, ...]      # capacitance bucket mentions pF
    power_parts: Tuple[str, ...]        # diodes, voltage-rated capacitors, regulator ICs
    passives: Tuple[str, ...]           # capacitors, resistors, inductors

    def count(self, t: ComponentType) -> int:
        return len(self.by_type.get(t, ()))

    def has(self, t: ComponentType) -> bool:
        return self.count(t) > 0


def census(components: Sequence[ComponentCandidate]) -> ComponentCensus:
    by_type: Dict[ComponentType, List[str]] = {}
    reg, logic, pf, power, passive = [], [], [], [], []
    for c in components:
        by_type.setdefault(c.type, []).append(c.id)
        p = c.properties
        if c.type == IC and p.pin_count is not None:
            (reg if p.pin_count <= 8 else logic).append(c.id)
        if c.type == C and "pF" in (p.estimated_capacitance or ""):
            pf.append(c.id)
        if (c.type == D or (c.type == C and p.voltage)
                or (c.type == IC and p.pin_count is not None and p.pin_count <= 8)):
            power.append(c.id)
        if c.type in (C, R, L):
            passive.append(c.id)
    return ComponentCensus(
        by_type={k: tuple(v) for k, v in by_type.items()},
        regulator_ics=tuple(reg), logic_ics=tuple(logic), pf_capacitors=tuple(pf),
        power_parts=tuple(power), passives=tuple(passive),
    )


@dataclass(frozen=True)
class Rule(Generic[T]):
    label: str
    when: Callable[[T], bool]


def first_match(rules: Sequence[Rule[T]], subject: T, default: str) -> str:
    for r in rules:
        if r.when(subject):
            return r.label
    return default


def all_matches(rules: Sequence[Rule[T]], subject: T) -> List[str]:
    return [r.label for r in rules if r.when(subject)]


CIRCUIT_TYPE_RULES: Tuple[Rule[ComponentCensus], ...] = (
    Rule("Digital/Mixed Signal", lambda c: c.has(IC) and c.has(C)),
    Rule("Analog Amplifier", lambda c: c.has(Q) and c.has(R)),
    Rule("Power Supply/Rectifier", lambda c: c.has(D) and c.has(C)),
    Rule("Filter/Oscillator", lambda c: c.has(L)),
)

FUNCTION_RULES: Tuple[Rule[ComponentCensus], ...] = (
    Rule("Voltage Regulation", lambda c: bool(c.regulator_ics) and c.count(C) >= 2 and c.has(L)),
    Rule("Signal Amplification", lambda c: c.has(Q) and c.count(R) >= 2 and c.has(C)),
    Rule("Signal Filtering", lambda c: (c.has(L) and c.has(C)) or (c.has(C) and c.has(R))),
    Rule("Digital Processing", lambda c: c.count(IC) >= 1 and len(c.pf_capacitors) >= 2),
)

# evaluated over the estimated-function list
TITLE_RULES: Tuple[Rule[Sequence[str]], ...] = (
    Rule("Power Supply Circuit", lambda f: "Voltage Regulation" in f),
    Rule("Amplifier Circuit", lambda f: "Signal Amplification" in f),
    Rule("Digital Logic Circuit", lambda f: "Digital Processing" in f),
    Rule("Filter Circuit", lambda f: "Signal Filtering" in f),
)

UNKNOWN_FUNCTION = "Unknown Function"
GENERAL_PURPOSE = "General Purpose"
GENERIC_TITLE = "Electronic Circuit"
NONE_DETECTED = "None detected"
