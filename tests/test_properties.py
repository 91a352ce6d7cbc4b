"""Property buckets per component type."""

from board_intel.schema.types import ComponentType
from board_intel.vision.properties import (
    capacitance, capacitor_voltage, estimate_properties, ic_package, ic_pin_count,
    resistor_power_rating, resistor_value,
)


def test_resistor_buckets():
    assert resistor_value(399) == "1/8W (100Ω - 1kΩ)"
    assert resistor_value(400) == "1/4W (1kΩ - 10kΩ)"
    assert resistor_value(1600) == "1/2W (10kΩ - 100kΩ)"
    assert resistor_power_rating(299) == "1/8W"
    assert resistor_power_rating(599) == "1/4W"
    assert resistor_power_rating(1199) == "1/2W"
    assert resistor_power_rating(1200) == "1W+"


def test_capacitor_buckets():
    assert capacitance(600) == "1pF - 100pF"
    assert capacitance(625) == "100pF - 1µF"
    assert capacitance(2500) == "1µF - 1000µF"
    assert capacitor_voltage(150) == "16V"
    assert capacitor_voltage(400) == "25V"
    assert capacitor_voltage(999) == "50V"
    assert capacitor_voltage(1000) == "100V+"


def test_ic_pins_round_half_up():
    assert ic_pin_count(20, 5) == 5      # 2*25/10 = 5.0
    assert ic_pin_count(21, 1) == 4      # 4.4
    assert ic_pin_count(12, 10) == 4     # 4.4
    assert ic_pin_count(15, 10) == 5     # 5.0
    assert ic_pin_count(16, 11) == 5     # 5.4
    assert ic_pin_count(17, 11) == 6     # 5.6
    assert ic_pin_count(10, 12.5) == 5   # 4.5 rounds up


def test_ic_package():
    assert ic_package(70, 30) == "SOP"
    assert ic_package(20, 50) == "SOP"
    assert ic_package(60, 40) == "DIP"
    assert ic_package(40, 30) == "SMD"


def test_fixed_and_shape_bags():
    d = estimate_properties(ComponentType.DIODE, 30, 10, 250)
    assert d.variant == "Standard" and d.estimated_voltage == "0.7V"
    wide = estimate_properties(ComponentType.TRANSISTOR, 40, 20, 600)
    tall = estimate_properties(ComponentType.TRANSISTOR, 20, 40, 600)
    assert (wide.variant, wide.package) == ("Power", "TO-220")
    assert (tall.variant, tall.package) == ("Signal", "TO-92")


def test_inductor_and_connector_have_empty_bags():
    for t in (ComponentType.INDUCTOR, ComponentType.CONNECTOR):
        assert estimate_properties(t, 30, 30, 700).model_dump(exclude_none=True) == {}
