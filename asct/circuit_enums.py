"""Enumerations for the circuit sizing optimization."""
import enum


class ComponentType(enum.Enum):
    """Enum for the netlist component types. The value is the netlist keyword."""

    pmos = "pmos4"
    nmos = "nmos4"
    capacitor = "capacitor"
    transmission_gate = "TRANSMISSION_GATE"
    # structural types, not sized by the optimization
    port = "PORT"
    net = "NET"
    vdd = "VDD"
    vss = "VSS"


class OptimizationTarget(enum.Enum):
    """Enum for the optimization targets."""

    balanced = "balanced"
    gain = "gain"
    bandwidth = "bandwidth"
    power = "power"
    noise = "noise"


class AlgorithmEnum(enum.Enum):
    """Enum for the search algorithms."""

    genetic_algorithm = "geneticAlgorithm"
    simulated_annealing = "simulatedAnnealing"


class SamplingEnum(enum.Enum):
    """Enum for the different sampling methods of the random scaling factor."""

    uniform = "uniform"
    latin_hypercube = "latin_hypercube"


class SearchModeEnum(enum.Enum):
    """Enum for the search mode."""

    # One population of independent random samples
    single_shot = "single_shot"
    # Optuna study with 'iterations' trials
    iterative = "iterative"
