"""Generate a sized design point from a topology."""
# python libraries
import dataclasses

# 3rd party libraries

# own libraries
from asct.circuit_dtos import Component, PerformanceMetrics
from asct.circuit_enums import ComponentType, AlgorithmEnum
from asct.performance_model import BASELINE_METRICS, compute_metrics

# Baseline size per component type (µm for transistors, fF for capacitors)
BASELINE_SIZES: dict[ComponentType, float] = {
    ComponentType.pmos: 10,
    ComponentType.nmos: 10,
    ComponentType.capacitor: 5,
    ComponentType.transmission_gate: 1,
}

# Size of types without baseline entry
DEFAULT_BASELINE_SIZE: float = 1


def baseline_size(component_type: ComponentType) -> float:
    """
    Return the baseline size of a component type.

    :param component_type: component type
    :type component_type: ComponentType
    :return: baseline size
    :rtype: float
    """
    return BASELINE_SIZES.get(component_type, DEFAULT_BASELINE_SIZE)


def is_transistor(component_type: ComponentType) -> bool:
    """Return True for NMOS and PMOS types."""
    return component_type in (ComponentType.nmos, ComponentType.pmos)


def scaled_size(component_type: ComponentType, transistor_factor: float, capacitor_factor: float) -> float:
    """
    Calculate the size of a component type for the given scaling factors.

    :param component_type: component type
    :type component_type: ComponentType
    :param transistor_factor: scaling factor of the transistor sizes
    :type transistor_factor: float
    :param capacitor_factor: scaling factor of the capacitor sizes
    :type capacitor_factor: float
    :return: scaled size
    :rtype: float
    """
    if is_transistor(component_type):
        return baseline_size(component_type) * transistor_factor
    elif component_type == ComponentType.capacitor:
        return baseline_size(component_type) * capacitor_factor
    return baseline_size(component_type)


def generate_design_point(base_components: list[Component] | tuple[Component, ...], transistor_factor: float,
                          capacitor_factor: float, algorithm: AlgorithmEnum,
                          baseline: PerformanceMetrics = BASELINE_METRICS) -> tuple[tuple[Component, ...], PerformanceMetrics]:
    """
    Generate the sized components and the performance metrics of one design point.

    The base components are not modified. Every returned component is a new object, so the same
    topology can be used for any number of design points.

    :param base_components: components of the topology
    :type base_components: list[Component]
    :param transistor_factor: scaling factor of the transistor sizes, greater than zero
    :type transistor_factor: float
    :param capacitor_factor: scaling factor of the capacitor sizes, greater than zero
    :type capacitor_factor: float
    :param algorithm: search algorithm
    :type algorithm: AlgorithmEnum
    :param baseline: performance of the unscaled topology
    :type baseline: PerformanceMetrics
    :return: sized components, performance metrics
    :rtype: tuple[tuple[Component, ...], PerformanceMetrics]
    """
    sized_components = tuple(
        dataclasses.replace(component, connections=tuple(component.connections),
                            size=scaled_size(component.type, transistor_factor, capacitor_factor))
        for component in base_components)

    metrics = compute_metrics(baseline, transistor_factor, capacitor_factor, algorithm)

    return sized_components, metrics
