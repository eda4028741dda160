"""Unit tests for the run history."""

# python libraries
import logging

# 3rd party libraries
import pytest

# own libraries
import asct.history as test_module
from asct.circuit_dtos import Constraints, PerformanceMetrics, TradeOffPoint
from asct.circuit_enums import OptimizationTarget

# Enable logger
pytestlogger = logging.getLogger(__name__)


def create_front(n_points: int) -> list[TradeOffPoint]:
    """Create a Pareto front without components."""
    return [TradeOffPoint(id=f"p{index}", components=(),
                          metrics=PerformanceMetrics(gain=60 + index, bandwidth=200, power=1.0 + index, slew_rate=100, noise_figure=2.0))
            for index in range(n_points)]


def test_history_capacity() -> None:
    """Test that the oldest entries are dropped and the newest entry is first."""
    history = test_module.RunHistory()
    for index in range(12):
        history.add(OptimizationTarget.balanced, Constraints(max_power=index), create_front(3))

    assert len(history) == 10
    assert history.capacity == 10
    assert [entry.id for entry in history.entries()] == list(range(12, 2, -1))
    assert history.find(1) is None
    assert history.find(3) is not None


def test_history_add_copies_constraints() -> None:
    """Test that later changes of the constraints do not change the entry."""
    history = test_module.RunHistory(capacity=2)
    constraints = Constraints(max_power="2")
    entry = history.add(OptimizationTarget.gain, constraints, [])
    constraints.max_power = "5"

    assert entry.constraints.max_power == "2"
    assert entry.target == OptimizationTarget.gain


def test_history_revert() -> None:
    """Test the recall of an entry and the representative point."""
    history = test_module.RunHistory()
    history.add(OptimizationTarget.power, Constraints(), create_front(5))
    history.add(OptimizationTarget.gain, Constraints(), [])

    entry, selected_point = history.revert(1)
    assert entry.target == OptimizationTarget.power
    assert selected_point is not None
    assert selected_point.id == "p2"

    entry, selected_point = history.revert(2)
    assert entry.pareto_front == []
    assert selected_point is None

    with pytest.raises(KeyError):
        history.revert(3)


def test_history_invalid_capacity() -> None:
    """Test that a capacity less than 1 is rejected."""
    with pytest.raises(ValueError):
        test_module.RunHistory(capacity=0)
