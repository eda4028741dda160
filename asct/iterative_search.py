"""Iterative search of the random scaling factor using optuna studies."""
# python libraries
import logging
from typing import Callable

# 3rd party libraries
import numpy as np
import optuna

# own libraries
from asct.circuit_dtos import Component, PerformanceMetrics, TradeOffPoint, Hyperparameters
from asct.circuit_enums import OptimizationTarget, AlgorithmEnum
from asct.design_point import generate_design_point
from asct.performance_model import BASELINE_METRICS
from asct.population_sampler import RANDOM_FACTOR_MIN_MAX_LIST, scaling_configuration, point_id

logger = logging.getLogger(__name__)

# Lowest temperature of the annealing schedule
MINIMUM_TEMPERATURE: float = 1e-12


class SimulatedAnnealingSampler(optuna.samplers.BaseSampler):
    """
    Simulated annealing sampler for optuna studies.

    The multi-objective trial values are mapped to a scalar energy by energy_function.
    A new candidate is drawn in the neighborhood of the current state. The state moves to the last
    completed trial with the Metropolis probability exp(-delta_energy / temperature). The temperature
    decreases geometrically by cooling_factor after every trial.
    """

    def __init__(self, energy_function: Callable[[list[float]], float], temperature: float = 1.0, cooling_factor: float = 0.95,
                 neighbor_range_factor: float = 0.1, seed: int | None = None) -> None:
        """
        Initialize the sampler.

        :param energy_function: maps the trial values to the energy to minimize
        :type energy_function: Callable[[list[float]], float]
        :param temperature: start temperature
        :type temperature: float
        :param cooling_factor: temperature factor per trial within (0, 1)
        :type cooling_factor: float
        :param neighbor_range_factor: neighborhood width relative to the parameter range
        :type neighbor_range_factor: float
        :param seed: random seed (reproducible)
        :type seed: int | None
        """
        self._rng = np.random.default_rng(seed)
        self._independent_sampler = optuna.samplers.RandomSampler(seed=seed)
        self._energy_function = energy_function
        self._temperature = temperature
        self._cooling_factor = cooling_factor
        self._neighbor_range_factor = neighbor_range_factor
        self._current_trial: optuna.trial.FrozenTrial | None = None

    @property
    def temperature(self) -> float:
        """Return the actual temperature."""
        return self._temperature

    def infer_relative_search_space(self, study: optuna.Study, trial: optuna.trial.FrozenTrial) -> dict[str, optuna.distributions.BaseDistribution]:
        """Return the parameters which are common to all completed trials."""
        return optuna.search_space.intersection_search_space(study.get_trials(deepcopy=False))

    def sample_relative(self, study: optuna.Study, trial: optuna.trial.FrozenTrial,
                        search_space: dict[str, optuna.distributions.BaseDistribution]) -> dict[str, float]:
        """Draw the next candidate in the neighborhood of the current state."""
        if search_space == {}:
            # first trial, sampled by the independent sampler
            return {}

        complete_trials = study.get_trials(deepcopy=False, states=(optuna.trial.TrialState.COMPLETE,))
        prev_trial = complete_trials[-1]

        if self._current_trial is None:
            probability = 1.0
        else:
            delta_energy = self._energy_function(prev_trial.values) - self._energy_function(self._current_trial.values)
            probability = 1.0 if delta_energy <= 0 else float(np.exp(-delta_energy / self._temperature))

        self._temperature = max(self._temperature * self._cooling_factor, MINIMUM_TEMPERATURE)

        if self._rng.uniform(0, 1) < probability:
            self._current_trial = prev_trial

        params: dict[str, float] = {}
        for param_name, param_distribution in search_space.items():
            if not isinstance(param_distribution, optuna.distributions.FloatDistribution):
                raise NotImplementedError(f"Only float parameters are supported, '{param_name}' is {type(param_distribution).__name__}.")

            current_value = self._current_trial.params[param_name]
            width = (param_distribution.high - param_distribution.low) * self._neighbor_range_factor
            neighbor_low = max(current_value - width, param_distribution.low)
            neighbor_high = min(current_value + width, param_distribution.high)
            params[param_name] = float(self._rng.uniform(neighbor_low, neighbor_high))

        return params

    def sample_independent(self, study: optuna.Study, trial: optuna.trial.FrozenTrial, param_name: str,
                           param_distribution: optuna.distributions.BaseDistribution) -> float:
        """Sample the first trial randomly."""
        return self._independent_sampler.sample_independent(study, trial, param_name, param_distribution)


class IterativeSearch:
    """Search the random scaling factor with an optuna study of 'iterations' trials (maximize gain, minimize power)."""

    def __init__(self, base_components: list[Component], target: OptimizationTarget, hyperparameters: Hyperparameters,
                 baseline: PerformanceMetrics = BASELINE_METRICS) -> None:
        """
        Initialize the search.

        :param base_components: components of the topology
        :type base_components: list[Component]
        :param target: optimization target
        :type target: OptimizationTarget
        :param hyperparameters: algorithm, iterations, population size and random seed
        :type hyperparameters: Hyperparameters
        :param baseline: performance of the unscaled topology, gain and power greater than zero
        :type baseline: PerformanceMetrics
        """
        self._base_components = base_components
        self._target = target
        self._hyperparameters = hyperparameters
        self._baseline = baseline
        self._point_dict: dict[int, TradeOffPoint] = {}

    def energy(self, values: list[float]) -> float:
        """
        Scalarize the trial values [gain, power] relative to the baseline.

        :param values: gain and power of a trial
        :type values: list[float]
        :return: energy, lower is better
        :rtype: float
        """
        gain, power = values
        return power / self._baseline.power - gain / self._baseline.gain

    def create_sampler(self) -> optuna.samplers.BaseSampler:
        """
        Create the optuna sampler of the configured algorithm.

        :return: NSGA-II sampler for the genetic algorithm, SimulatedAnnealingSampler for simulated annealing
        :rtype: optuna.samplers.BaseSampler
        """
        if self._hyperparameters.algorithm == AlgorithmEnum.genetic_algorithm:
            # NSGA-II needs at least two individuals per generation
            return optuna.samplers.NSGAIISampler(population_size=max(2, self._hyperparameters.population_size),
                                                 seed=self._hyperparameters.random_seed)
        elif self._hyperparameters.algorithm == AlgorithmEnum.simulated_annealing:
            return SimulatedAnnealingSampler(energy_function=self.energy, seed=self._hyperparameters.random_seed)

        raise ValueError(f"algorithm '{self._hyperparameters.algorithm}' not available.")

    def _objective(self, trial: optuna.Trial) -> tuple[float, float]:
        """
        Objective function to optimize.

        :param trial: optuna trial
        :type trial: optuna.Trial
        :return: gain, power
        :rtype: tuple[float, float]
        """
        random_factor_suggest = trial.suggest_float("random_factor", RANDOM_FACTOR_MIN_MAX_LIST[0], RANDOM_FACTOR_MIN_MAX_LIST[1])

        scaling = scaling_configuration(self._target, random_factor_suggest, self._hyperparameters.algorithm)
        components, metrics = generate_design_point(self._base_components, scaling.transistor_factor, scaling.capacitor_factor,
                                                    scaling.algorithm, self._baseline)

        trial.set_user_attr("transistor_factor", scaling.transistor_factor)
        trial.set_user_attr("capacitor_factor", scaling.capacitor_factor)
        self._point_dict[trial.number] = TradeOffPoint(id=point_id(trial.number), components=components, metrics=metrics)

        return metrics.gain, metrics.power

    def run(self) -> list[TradeOffPoint]:
        """
        Run the study.

        :return: one design point per trial in trial order (empty for iterations <= 0)
        :rtype: list[TradeOffPoint]
        """
        self._point_dict = {}
        if self._hyperparameters.iterations <= 0:
            return []

        optuna.logging.set_verbosity(optuna.logging.ERROR)

        sampler = self.create_sampler()
        study = optuna.create_study(directions=["maximize", "minimize"], sampler=sampler)
        logger.info(f"Sampler is {study.sampler.__class__.__name__}")

        study.optimize(self._objective, n_trials=self._hyperparameters.iterations, n_jobs=1, show_progress_bar=False)

        logger.info(f"Finished {len(study.trials)} trials.")
        return [self._point_dict[number] for number in sorted(self._point_dict)]
