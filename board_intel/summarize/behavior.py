# board_intel/summarize/behavior.py
from __future__ import annotations
from typing import Sequence, Tuple

from loguru import logger

from board_intel.schema.types import (
    CircuitBehaviorProfile, ComponentCandidate, ControlLogicProfile, PowerSupplyProfile,
    SignalProcessingProfile,
)
from board_intel.summarize.rules import (
    CIRCUIT_TYPE_RULES, FUNCTION_RULES, GENERAL_PURPOSE, NONE_DETECTED, UNKNOWN_FUNCTION,
    ComponentCensus, all_matches, census, first_match,
)

def circuit_type(c: ComponentCensus) -> str:
    return first_match(CIRCUIT_TYPE_RULES, c, GENERAL_PURPOSE)

def estimated_functions(c: ComponentCensus) -> Tuple[str, ...]:
    found = all_matches(FUNCTION_RULES, c)
    return tuple(found) if found else (UNKNOWN_FUNCTION,)

def power_supply(c: ComponentCensus) -> PowerSupplyProfile:
    parts = c.power_parts
    if len(parts) >= 3:
        return PowerSupplyProfile(type="Switching Power Supply", estimated_voltage="3.3V - 12V", components=parts)
    if len(parts) >= 1:
        return PowerSupplyProfile(type="Linear Regulator", estimated_voltage="5V", components=parts)
    return PowerSupplyProfile(type="External Power", estimated_voltage="Unknown")

def signal_processing(c: ComponentCensus) -> SignalProcessingProfile:
    if len(c.passives) >= 3:
        return SignalProcessingProfile(type="Active Filtering", bandwidth="Unknown", components=c.passives)
    return SignalProcessingProfile(type=NONE_DETECTED)

def control_logic(c: ComponentCensus) -> ControlLogicProfile:
    if c.logic_ics:
        return ControlLogicProfile(type="Microcontroller/Processor", components=c.logic_ics)
    return ControlLogicProfile(type=NONE_DETECTED)

def classify_behavior(components: Sequence[ComponentCandidate]) -> CircuitBehaviorProfile:
    """Rule-based guess at what the board does; never fails, every branch has a fallback."""
    c = census(components)
    profile = CircuitBehaviorProfile(
        circuit_type=circuit_type(c),
        estimated_function=estimated_functions(c),
        power_supply=power_supply(c),
        signal_processing=signal_processing(c),
        control_logic=control_logic(c),
    )
    logger.info(f"[behavior] type={profile.circuit_type!r} functions={list(profile.estimated_function)}")
    return profile
