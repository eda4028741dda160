"""Filter design points by the user constraints."""
# python libraries
import logging
import math

# 3rd party libraries

# own libraries
from asct.circuit_dtos import TradeOffPoint, Constraints

logger = logging.getLogger(__name__)


def parse_constraint_value(value: float | str | None, constraint_name: str = "constraint") -> float | None:
    """
    Convert a constraint input to a limit value.

    None, empty strings, NaN and non-numeric strings are treated as unconstrained.
    Non-numeric strings are reported as warning.

    :param value: constraint input, e.g. 2.0, "2" or ""
    :type value: float | str | None
    :param constraint_name: name of the constraint for the warning
    :type constraint_name: str
    :return: limit value or None, if unconstrained
    :rtype: float | None
    """
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip() == "":
            return None
        try:
            limit = float(value)
        except ValueError:
            logger.warning(f"Value '{value}' of {constraint_name} is not numeric. {constraint_name} is ignored!")
            return None
    else:
        limit = float(value)

    if math.isnan(limit):
        return None
    return limit


def filter_points(points: list[TradeOffPoint], constraints: Constraints) -> list[TradeOffPoint]:
    """
    Remove the design points violating the maximum power or the maximum noise figure.

    The order of the points is kept. An empty list is a valid result (no feasible design).

    :param points: design points
    :type points: list[TradeOffPoint]
    :param constraints: maximum power and maximum noise figure
    :type constraints: Constraints
    :return: feasible design points
    :rtype: list[TradeOffPoint]
    """
    max_power = parse_constraint_value(constraints.max_power, "max_power")
    max_noise = parse_constraint_value(constraints.max_noise, "max_noise")

    feasible_points = [point for point in points
                       if (max_power is None or point.metrics.power <= max_power)
                       and (max_noise is None or point.metrics.noise_figure <= max_noise)]

    logger.debug(f"{len(feasible_points)} of {len(points)} design points are feasible.")
    return feasible_points
