"""Classes and toml checker for the flow control and the circuit configuration."""
# python libraries
from typing import Literal

# 3rd party libraries
from pydantic import BaseModel

# own libraries


# ######################################################
# flow control
# ######################################################

class General(BaseModel):
    """General flow control information."""

    project_directory: str


class Results(BaseModel):
    """Flow control for the results."""

    subdirectory: str
    is_plot: bool = True


class History(BaseModel):
    """Flow control for the run history."""

    capacity: int = 10


class ConfigurationDataFiles(BaseModel):
    """File names of the configuration files."""

    circuit_configuration_file: str


class FlowControl(BaseModel):
    """General flow control class."""

    general: General
    results: Results
    history: History = History()
    configuration_data_files: ConfigurationDataFiles


# ######################################################
# circuit configuration
# ######################################################

class TomlTopology(BaseModel):
    """Netlist and ports of the topology."""

    # Either a sample circuit id or netlist and ports
    sample_circuit: str = ""
    netlist: str = ""
    ports: str = ""


class TomlOptimization(BaseModel):
    """Optimization target and hyperparameters."""

    target: Literal['balanced', 'gain', 'bandwidth', 'power', 'noise']
    algorithm: Literal['geneticAlgorithm', 'simulatedAnnealing']
    search_mode: Literal['single_shot', 'iterative'] = 'single_shot'
    sampling_method: Literal['uniform', 'latin_hypercube'] = 'uniform'
    iterations: int
    population_size: int
    random_seed: int | None = None


class TomlConstraints(BaseModel):
    """Constraints. Empty or non-numeric strings are unconstrained."""

    max_power: float | str = ""
    max_noise: float | str = ""


class TomlBaseline(BaseModel):
    """Performance of the unscaled topology."""

    gain: float = 60
    bandwidth: float = 200
    power: float = 1.5
    slew_rate: float = 100
    noise_figure: float = 2.0


class TomlCircuitConf(BaseModel):
    """Circuit sizing configuration."""

    topology: TomlTopology
    optimization: TomlOptimization
    constraints: TomlConstraints = TomlConstraints()
    baseline: TomlBaseline = TomlBaseline()
