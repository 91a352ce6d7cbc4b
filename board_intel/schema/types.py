# pydantic models: primitives, components, traces, connections, netlist, profiles, schematic
from __future__ import annotations
from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Coord = Tuple[float, float]
BBox  = Tuple[float, float, float, float]   # x1, y1, x2, y2


class Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ComponentType(str, Enum):
    RESISTOR = "Resistor"
    CAPACITOR = "Capacitor"
    IC = "IC"
    DIODE = "Diode"
    TRANSISTOR = "Transistor"
    INDUCTOR = "Inductor"
    CONNECTOR = "Connector"

    @property
    def key(self) -> str:
        return self.value.lower()

    @classmethod
    def from_key(cls, key: str) -> "ComponentType":
        for t in cls:
            if t.key == key.lower():
                return t
        raise ValueError(f"unknown component type {key!r}")


class NotComputed(Frozen):
    """Marks an analysis result the heuristics do not produce."""
    kind: Literal["not_computed"] = "not_computed"
    reason: str


# ---------- detection ----------

class GeometricPrimitive(Frozen):
    index: int
    points: Tuple[Coord, ...]
    area: float
    perimeter: float
    bbox: BBox
    aspect_ratio: float
    circularity: float

    @property
    def width(self) -> float:
        return self.bbox[2] - self.bbox[0]

    @property
    def height(self) -> float:
        return self.bbox[3] - self.bbox[1]

    @property
    def center(self) -> Coord:
        return ((self.bbox[0] + self.bbox[2]) / 2.0, (self.bbox[1] + self.bbox[3]) / 2.0)


class ComponentProperties(Frozen):
    estimated_value: Optional[str] = None
    power_rating: Optional[str] = None
    estimated_capacitance: Optional[str] = None
    voltage: Optional[str] = None
    pin_count: Optional[int] = None
    package: Optional[str] = None
    variant: Optional[str] = None
    estimated_voltage: Optional[str] = None


class ComponentCandidate(Frozen):
    kind: Literal["component"] = "component"
    id: str
    type: ComponentType
    confidence: float = Field(ge=0.0, le=1.0)
    position: Coord
    bbox: BBox
    properties: ComponentProperties = ComponentProperties()

    def value_label(self) -> Optional[str]:
        return self.properties.estimated_value or self.properties.estimated_capacitance


class TraceSegment(Frozen):
    kind: Literal["trace"] = "trace"
    id: str
    path: Tuple[Coord, ...]
    width: float


class Discarded(Frozen):
    kind: Literal["discarded"] = "discarded"
    index: int
    reason: str = "noise"


Classification = Annotated[Union[ComponentCandidate, TraceSegment, Discarded],
                           Field(discriminator="kind")]


# ---------- connectivity ----------

class ComponentTraceEdge(Frozen):
    kind: Literal["component-trace"] = "component-trace"
    component: str
    trace: str
    connection_point: Coord

    def involves(self, cid: str) -> bool:
        return self.component == cid


class ComponentComponentEdge(Frozen):
    kind: Literal["component-component"] = "component-component"
    component1: str
    component2: str
    via: Tuple[str, ...]
    estimated_resistance: float

    def involves(self, cid: str) -> bool:
        return cid in (self.component1, self.component2)

    @property
    def pair_id(self) -> str:
        return f"net_{self.component1}_{self.component2}"


ConnectionEdge = Annotated[Union[ComponentTraceEdge, ComponentComponentEdge],
                           Field(discriminator="kind")]


class Net(Frozen):
    id: str
    trace: str
    components: Tuple[str, ...]


class Pin(Frozen):
    pin: int
    net: str


class NetlistEntry(Frozen):
    id: str
    type: ComponentType
    value: str
    pins: Tuple[Pin, ...]


class Netlist(Frozen):
    components: Tuple[NetlistEntry, ...]
    nets: Tuple[Net, ...]


# ---------- behavior / power / signal flow ----------

class PowerSupplyProfile(Frozen):
    type: str
    estimated_voltage: str
    components: Tuple[str, ...] = ()


class SignalProcessingProfile(Frozen):
    type: str
    bandwidth: Optional[str] = None
    components: Tuple[str, ...] = ()


class ControlLogicProfile(Frozen):
    type: str
    components: Tuple[str, ...] = ()


class CircuitBehaviorProfile(Frozen):
    circuit_type: str
    estimated_function: Tuple[str, ...]
    power_supply: PowerSupplyProfile
    signal_processing: SignalProcessingProfile
    control_logic: ControlLogicProfile


class PowerProfile(Frozen):
    estimated_total_power_mw: int
    power_rails: NotComputed = NotComputed(reason="rail decomposition is not derived from nets")
    critical_paths: NotComputed = NotComputed(reason="critical-path detection is not implemented")


class SignalFlowProfile(Frozen):
    input_stages: Tuple[str, ...] = ()
    processing_stages: Tuple[str, ...] = ()
    output_stages: Tuple[str, ...] = ()
    feedback_paths: NotComputed = NotComputed(reason="feedback-path detection is not implemented")


class CircuitAnalysis(Frozen):
    connections: Tuple[ConnectionEdge, ...]
    netlist: Netlist
    behavior: CircuitBehaviorProfile
    power: PowerProfile
    signal_flow: SignalFlowProfile


# ---------- schematic ----------

class PinLayout(Frozen):
    id: int
    position: Coord
    side: Literal["left", "right", "top", "bottom"]
    label: Optional[str] = None


class PlacedComponent(Frozen):
    id: str
    type: ComponentType
    symbol: str
    position: Coord
    size: Tuple[float, float]
    pins: Tuple[PinLayout, ...]
    label: str
    value: str = ""


class WireEnd(Frozen):
    component: str
    pin: int = 1


class Wire(Frozen):
    id: str
    source: WireEnd
    target: WireEnd
    path: Tuple[Coord, ...]
    net_name: str
    routed: bool = False


class PowerRail(Frozen):
    name: str
    voltage: str
    color: str
    y: float
    x_span: Tuple[float, float] = (50.0, 950.0)
    members: Tuple[str, ...] = ()


class Annotation(Frozen):
    text: str
    position: Coord
    font_size: int = 12
    font_weight: str = "normal"


class SchematicModel(Frozen):
    title: str
    components: Tuple[PlacedComponent, ...]
    wires: Tuple[Wire, ...] = ()
    power_rails: Tuple[PowerRail, ...] = ()
    annotations: Tuple[Annotation, ...] = ()


# ---------- run result ----------

class AnalysisSummary(Frozen):
    component_count: int
    type_count: int
    functions: Tuple[str, ...]
    circuit_type: str
    total_power_mw: int


class AnalysisResult(Frozen):
    width: int
    height: int
    components: Tuple[ComponentCandidate, ...]
    traces: Tuple[TraceSegment, ...]
    analysis: CircuitAnalysis
    schematic: SchematicModel
    summary: AnalysisSummary
    discarded: int = 0
