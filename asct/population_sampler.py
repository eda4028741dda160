"""Sample a population of randomized design points biased towards the optimization target."""
# python libraries
import logging

# 3rd party libraries
import numpy as np
from scipy.stats import qmc

# own libraries
from asct.circuit_dtos import Component, PerformanceMetrics, ScalingConfiguration, TradeOffPoint, Hyperparameters
from asct.circuit_enums import OptimizationTarget, AlgorithmEnum, SamplingEnum
from asct.design_point import generate_design_point
from asct.performance_model import BASELINE_METRICS

logger = logging.getLogger(__name__)

# Range of the random factor [min, max)
RANDOM_FACTOR_MIN_MAX_LIST: list[float] = [0.5, 1.5]

# Transistor factor around which the population is sampled
TARGET_TRANSISTOR_FACTOR: dict[OptimizationTarget, float] = {
    OptimizationTarget.balanced: 1.0,
    OptimizationTarget.gain: 1.4,
    OptimizationTarget.power: 0.6,
    OptimizationTarget.bandwidth: 0.8,
    OptimizationTarget.noise: 1.3,
}

# Capacitor factor for the bandwidth target, 1.0 for all other targets
BANDWIDTH_CAPACITOR_FACTOR: float = 0.7


def point_id(index: int) -> str:
    """Return the design point id for a 0-based index."""
    return f"p{index}"


def scaling_configuration(target: OptimizationTarget, random_factor: float, algorithm: AlgorithmEnum) -> ScalingConfiguration:
    """
    Calculate the scaling factors of one population member.

    :param target: optimization target
    :type target: OptimizationTarget
    :param random_factor: random factor within [0.5, 1.5)
    :type random_factor: float
    :param algorithm: search algorithm
    :type algorithm: AlgorithmEnum
    :return: scaling configuration
    :rtype: ScalingConfiguration
    """
    base_transistor_factor = TARGET_TRANSISTOR_FACTOR.get(target, TARGET_TRANSISTOR_FACTOR[OptimizationTarget.balanced])
    base_capacitor_factor = BANDWIDTH_CAPACITOR_FACTOR if target == OptimizationTarget.bandwidth else 1.0

    return ScalingConfiguration(transistor_factor=base_transistor_factor * random_factor,
                                capacitor_factor=base_capacitor_factor * random_factor,
                                algorithm=algorithm)


def draw_random_factors(population_size: int, rng: np.random.Generator, sampling_method: SamplingEnum) -> np.ndarray:
    """
    Draw the random factors of a population within [0.5, 1.5).

    :param population_size: number of random factors
    :type population_size: int
    :param rng: random number generator
    :type rng: np.random.Generator
    :param sampling_method: uniform or latin hypercube sampling
    :type sampling_method: SamplingEnum
    :return: random factors
    :rtype: np.ndarray
    """
    if population_size <= 0:
        return np.empty(0)

    if sampling_method == SamplingEnum.uniform:
        return rng.uniform(RANDOM_FACTOR_MIN_MAX_LIST[0], RANDOM_FACTOR_MIN_MAX_LIST[1], size=population_size)
    elif sampling_method == SamplingEnum.latin_hypercube:
        # one stratum per population member
        sampler = qmc.LatinHypercube(d=1, rng=rng)
        sample = sampler.random(n=population_size)
        scaled_sample = qmc.scale(sample, [RANDOM_FACTOR_MIN_MAX_LIST[0]], [RANDOM_FACTOR_MIN_MAX_LIST[1]])
        return scaled_sample[:, 0]

    raise ValueError(f"sampling_method '{sampling_method}' not available.")


class PopulationSampler:
    """Draw a population of design points around the target-biased scaling factor."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        """
        Initialize the sampler.

        :param rng: random number generator. If None, a generator is created from the random seed of the hyperparameters.
        :type rng: np.random.Generator | None
        """
        self._rng = rng

    def sample(self, base_components: list[Component], target: OptimizationTarget, hyperparameters: Hyperparameters,
               baseline: PerformanceMetrics = BASELINE_METRICS) -> list[TradeOffPoint]:
        """
        Generate the population.

        The number of iterations is not used here, see IterativeSearch.

        :param base_components: components of the topology
        :type base_components: list[Component]
        :param target: optimization target
        :type target: OptimizationTarget
        :param hyperparameters: population size, algorithm and sampling method
        :type hyperparameters: Hyperparameters
        :param baseline: performance of the unscaled topology
        :type baseline: PerformanceMetrics
        :return: population with hyperparameters.population_size points (empty for sizes <= 0)
        :rtype: list[TradeOffPoint]
        """
        rng = self._rng if self._rng is not None else np.random.default_rng(hyperparameters.random_seed)

        random_factor_vec = draw_random_factors(hyperparameters.population_size, rng, hyperparameters.sampling_method)
        logger.debug(f"{random_factor_vec=}")

        population: list[TradeOffPoint] = []
        for index, random_factor in enumerate(random_factor_vec):
            scaling = scaling_configuration(target, float(random_factor), hyperparameters.algorithm)
            components, metrics = generate_design_point(base_components, scaling.transistor_factor, scaling.capacitor_factor,
                                                        scaling.algorithm, baseline)
            population.append(TradeOffPoint(id=point_id(index), components=components, metrics=metrics))

        logger.info(f"Generated population of {len(population)} design points for target '{target.value}'.")
        return population
