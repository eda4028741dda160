"""Closed-form performance model of a sized design."""
# python libraries
import math

# 3rd party libraries

# own libraries
from asct.circuit_dtos import PerformanceMetrics
from asct.circuit_enums import AlgorithmEnum

# Performance of the unscaled topology
BASELINE_METRICS = PerformanceMetrics(gain=60, bandwidth=200, power=1.5, slew_rate=100, noise_figure=2.0)

# Better trade-offs found by the genetic algorithm
GENETIC_ALGORITHM_GAIN_FACTOR = 1.05
GENETIC_ALGORITHM_POWER_FACTOR = 0.95

METRICS_DECIMALS = 2


def compute_metrics(baseline: PerformanceMetrics, transistor_factor: float, capacitor_factor: float,
                    algorithm: AlgorithmEnum) -> PerformanceMetrics:
    """
    Calculate the performance metrics of a scaled design.

    Both factors must be greater than zero. This is not checked here, the sampler guarantees it.

    :param baseline: performance of the unscaled topology
    :type baseline: PerformanceMetrics
    :param transistor_factor: scaling factor of the transistor sizes
    :type transistor_factor: float
    :param capacitor_factor: scaling factor of the capacitor sizes
    :type capacitor_factor: float
    :param algorithm: search algorithm
    :type algorithm: AlgorithmEnum
    :return: performance metrics, rounded to two decimals
    :rtype: PerformanceMetrics
    """
    gain = baseline.gain * math.sqrt(transistor_factor)
    power = baseline.power * transistor_factor ** 1.5
    bandwidth = baseline.bandwidth / math.sqrt(transistor_factor * capacitor_factor)
    noise_figure = baseline.noise_figure / transistor_factor
    slew_rate = baseline.slew_rate / capacitor_factor

    if algorithm == AlgorithmEnum.genetic_algorithm:
        gain *= GENETIC_ALGORITHM_GAIN_FACTOR
        power *= GENETIC_ALGORITHM_POWER_FACTOR

    return PerformanceMetrics(
        gain=round(gain, METRICS_DECIMALS),
        bandwidth=round(bandwidth, METRICS_DECIMALS),
        power=round(power, METRICS_DECIMALS),
        slew_rate=round(slew_rate, METRICS_DECIMALS),
        noise_figure=round(noise_figure, METRICS_DECIMALS)
    )
