"""Data transfer objects (DTOs) for the circuit sizing optimization."""
# python libraries
import dataclasses
import datetime

# 3rd party libraries

# own libraries
from asct.circuit_enums import ComponentType, OptimizationTarget, AlgorithmEnum, SamplingEnum, SearchModeEnum


@dataclasses.dataclass(frozen=True)
class Component:
    """One circuit element of the topology."""

    id: str
    type: ComponentType
    # Order encodes the terminal position, e.g. drain, gate, source, bulk
    connections: tuple[str, ...]
    # µm for transistors, fF for capacitors
    size: float = 1.0


@dataclasses.dataclass(frozen=True)
class PerformanceMetrics:
    """Performance of one design point."""

    # dB
    gain: float
    # MHz
    bandwidth: float
    # mW
    power: float
    # V/µs
    slew_rate: float
    # dB
    noise_figure: float


@dataclasses.dataclass(frozen=True)
class ScalingConfiguration:
    """Scaling factors to generate one design point."""

    transistor_factor: float
    capacitor_factor: float
    algorithm: AlgorithmEnum


@dataclasses.dataclass(frozen=True)
class TradeOffPoint:
    """One fully sized candidate design and its performance."""

    id: str
    components: tuple[Component, ...]
    metrics: PerformanceMetrics


@dataclasses.dataclass
class Constraints:
    """User constraints of one run. None, empty or non-numeric values are unconstrained."""

    max_power: float | str | None = None
    max_noise: float | str | None = None


@dataclasses.dataclass
class Hyperparameters:
    """Search configuration of one run."""

    algorithm: AlgorithmEnum
    # Number of optuna trials, only used by the iterative search mode
    iterations: int
    population_size: int
    random_seed: int | None = None
    sampling_method: SamplingEnum = SamplingEnum.uniform
    search_mode: SearchModeEnum = SearchModeEnum.single_shot


@dataclasses.dataclass
class OptimizationResult:
    """Result of one optimization run."""

    pareto_front: list[TradeOffPoint]
    all_points: list[TradeOffPoint]

    @property
    def is_population_generated(self) -> bool:
        """Return True, if the run has generated at least one design point."""
        return len(self.all_points) > 0

    @property
    def is_feasible_design_found(self) -> bool:
        """Return True, if at least one design point satisfies the constraints."""
        return len(self.pareto_front) > 0


@dataclasses.dataclass
class HistoryEntry:
    """Snapshot of one optimization run."""

    id: int
    timestamp: datetime.datetime
    target: OptimizationTarget
    constraints: Constraints
    pareto_front: list[TradeOffPoint]


@dataclasses.dataclass(frozen=True)
class GraphNode:
    """Node of the connectivity graph (component, net or port)."""

    id: str
    type: ComponentType
    size: float | None = None


@dataclasses.dataclass(frozen=True)
class GraphLink:
    """Link between a component and a net."""

    source: str
    target: str


@dataclasses.dataclass
class GraphData:
    """Parsed topology and its connectivity graph."""

    components: list[Component]
    nodes: list[GraphNode]
    links: list[GraphLink]
