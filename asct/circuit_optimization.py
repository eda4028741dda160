"""Multi-objective sizing optimization: sample, filter by constraints and extract the Pareto front."""
# python libraries
import logging

# 3rd party libraries
import numpy as np

# own libraries
from asct.circuit_dtos import Component, PerformanceMetrics, TradeOffPoint, Constraints, Hyperparameters, OptimizationResult
from asct.circuit_enums import OptimizationTarget, SearchModeEnum
from asct.constraint_filter import filter_points
from asct.iterative_search import IterativeSearch
from asct.pareto import pareto_front
from asct.performance_model import BASELINE_METRICS
from asct.population_sampler import PopulationSampler

logger = logging.getLogger(__name__)


def run_optimization(base_components: list[Component], target: OptimizationTarget, constraints: Constraints,
                     hyperparameters: Hyperparameters, baseline: PerformanceMetrics = BASELINE_METRICS,
                     rng: np.random.Generator | None = None) -> OptimizationResult:
    """
    Run one optimization.

    The population is generated by the PopulationSampler (single shot) or by the IterativeSearch,
    filtered by the constraints and reduced to the Pareto front.
    An empty population or an empty Pareto front is a valid result.

    :param base_components: components of the topology, not modified
    :type base_components: list[Component]
    :param target: optimization target
    :type target: OptimizationTarget
    :param constraints: maximum power and maximum noise figure
    :type constraints: Constraints
    :param hyperparameters: search configuration
    :type hyperparameters: Hyperparameters
    :param baseline: performance of the unscaled topology
    :type baseline: PerformanceMetrics
    :param rng: random number generator of the single shot sampler, created from the random seed if None
    :type rng: np.random.Generator | None
    :return: Pareto front and all generated points
    :rtype: OptimizationResult
    """
    if hyperparameters.search_mode == SearchModeEnum.single_shot:
        all_points = PopulationSampler(rng).sample(base_components, target, hyperparameters, baseline)
    elif hyperparameters.search_mode == SearchModeEnum.iterative:
        all_points = IterativeSearch(base_components, target, hyperparameters, baseline).run()
    else:
        raise ValueError(f"search_mode '{hyperparameters.search_mode}' not available.")

    feasible_points = filter_points(all_points, constraints)
    front = pareto_front(feasible_points)

    if all_points and not feasible_points:
        logger.warning("No design point satisfies the constraints!")
    logger.info(f"Pareto front: {len(front)} points, feasible: {len(feasible_points)}, population: {len(all_points)}.")

    return OptimizationResult(pareto_front=front, all_points=all_points)


def select_representative_point(front: list[TradeOffPoint]) -> TradeOffPoint | None:
    """
    Select the middle point of the Pareto front as balanced design.

    :param front: Pareto front sorted by power
    :type front: list[TradeOffPoint]
    :return: design point at index len(front) // 2 or None for an empty front
    :rtype: TradeOffPoint | None
    """
    if not front:
        return None
    return front[len(front) // 2]
