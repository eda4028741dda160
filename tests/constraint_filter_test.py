"""Unit tests for the constraint filter."""

# python libraries
import logging

# 3rd party libraries
import pytest
from _pytest.logging import LogCaptureFixture

# own libraries
import asct.constraint_filter as test_module
from asct.circuit_dtos import Constraints, PerformanceMetrics, TradeOffPoint

# Enable logger
pytestlogger = logging.getLogger(__name__)


def create_point(point_id: str, power: float, noise_figure: float) -> TradeOffPoint:
    """Create a design point without components."""
    return TradeOffPoint(id=point_id, components=(),
                         metrics=PerformanceMetrics(gain=60, bandwidth=200, power=power, slew_rate=100, noise_figure=noise_figure))


test_point_list: list[TradeOffPoint] = [
    create_point("p0", 1.0, 3.0),
    create_point("p1", 2.5, 1.0),
    create_point("p2", 2.0, 2.0),
    create_point("p3", 0.5, 2.5),
]

#########################################################################################################
# test of filter_points
#########################################################################################################

# test parameter list
@pytest.mark.parametrize("constraints, expected_id_list", [
    # Unconstrained
    (Constraints(), ["p0", "p1", "p2", "p3"]),
    (Constraints(max_power="", max_noise=""), ["p0", "p1", "p2", "p3"]),
    # Maximum power as string, limit is inclusive
    (Constraints(max_power="2"), ["p0", "p2", "p3"]),
    (Constraints(max_power=2.0), ["p0", "p2", "p3"]),
    # Maximum noise figure
    (Constraints(max_noise=2.0), ["p1", "p2"]),
    # Both constraints
    (Constraints(max_power=2.0, max_noise="2.5"), ["p2", "p3"]),
    # No feasible point
    (Constraints(max_power=0.1), []),
    # NaN is unconstrained
    (Constraints(max_power=float("nan")), ["p0", "p1", "p2", "p3"]),
])
def test_filter_points(constraints: Constraints, expected_id_list: list[str]) -> None:
    """Test the method filter_points.

    :param constraints: constraints
    :type  constraints: Constraints
    :param expected_id_list: ids of the expected feasible points in expected order
    :type  expected_id_list: list[str]
    """
    feasible_point_list = test_module.filter_points(test_point_list, constraints)
    assert [point.id for point in feasible_point_list] == expected_id_list


def test_filter_points_non_numeric(caplog: LogCaptureFixture) -> None:
    """Test that a non-numeric constraint is ignored with a warning.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    """
    with caplog.at_level(logging.WARNING):
        feasible_point_list = test_module.filter_points(test_point_list, Constraints(max_power="abc"))

    assert feasible_point_list == test_point_list
    assert caplog.records[0].message == "Value 'abc' of max_power is not numeric. max_power is ignored!"

#########################################################################################################
# test of parse_constraint_value
#########################################################################################################

# test parameter list
@pytest.mark.parametrize("value, expected_limit", [
    (None, None),
    ("", None),
    ("   ", None),
    ("1.5", 1.5),
    (" 3 ", 3.0),
    (2, 2.0),
    (0.0, 0.0),
    ("xyz", None),
])
def test_parse_constraint_value(value: float | str | None, expected_limit: float | None) -> None:
    """Test the method parse_constraint_value.

    :param value: constraint input
    :type  value: float | str | None
    :param expected_limit: expected limit
    :type  expected_limit: float | None
    """
    assert test_module.parse_constraint_value(value) == expected_limit
