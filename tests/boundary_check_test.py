"""Unit tests for boundary check."""

# python libraries
import logging
from enum import Enum

# 3rd party libraries
import pytest
from _pytest.logging import LogCaptureFixture

# own libraries
import asct.boundary_check as test_module
from asct.boundary_check import CheckCondition as c_flag

# Enable logger
pytestlogger = logging.getLogger(__name__)

class TestCase(Enum):
    """Enum of test types."""

    # Valid test case
    ValidValues = 0             # Test value within the boundaries
    # Failure test case
    BoundaryInconsistent = 1    # Test when minimum > maximum
    ExceedLowerLimit = 2        # Test when the lower limit is exceeded
    ExceedUpperLimit = 3        # Test when the upper limit is exceeded

#########################################################################################################
# test of check_float_value
#########################################################################################################

# test parameter list
@pytest.mark.parametrize("minimum, maximum, value, check_minimum, check_maximum, test_case", [
    # Valid test case
    (0, 10, 0, c_flag.check_inclusive, c_flag.check_inclusive, TestCase.ValidValues),
    (0, 10, 10, c_flag.check_inclusive, c_flag.check_inclusive, TestCase.ValidValues),
    (0, 10, 5, c_flag.check_exclusive, c_flag.check_exclusive, TestCase.ValidValues),
    (0, 10, -5, c_flag.check_ignore, c_flag.check_ignore, TestCase.ValidValues),
    # Failure test case
    (10, 0, 5, c_flag.check_inclusive, c_flag.check_inclusive, TestCase.BoundaryInconsistent),
    (0, 10, 0, c_flag.check_exclusive, c_flag.check_inclusive, TestCase.ExceedLowerLimit),
    (0, 10, -1, c_flag.check_inclusive, c_flag.check_inclusive, TestCase.ExceedLowerLimit),
    (0, 10, 10, c_flag.check_inclusive, c_flag.check_exclusive, TestCase.ExceedUpperLimit),
    (0, 10, 11, c_flag.check_inclusive, c_flag.check_inclusive, TestCase.ExceedUpperLimit),
])
# Unit test function
def test_check_float_value(minimum: float, maximum: float, value: float, check_minimum: c_flag, check_maximum: c_flag,
                           test_case: TestCase) -> None:
    """Test the method check_float_value.

    :param minimum: Minimum value of the range
    :type  minimum: float
    :param maximum: Maximum value of the range
    :type  maximum: float
    :param value: Value to check
    :type  value: float
    :param check_minimum: Type of check of the minimum
    :type  check_minimum: CheckCondition
    :param check_maximum: Type of check of the maximum
    :type  check_maximum: CheckCondition
    :param test_case: Type of test case
    :type  test_case: TestCase
    """
    is_check_passed, issue_report = test_module.BoundaryCheck.check_float_value(minimum, maximum, value, "test_parameter",
                                                                                check_minimum, check_maximum)

    if test_case == TestCase.ValidValues:
        assert is_check_passed
        assert issue_report == ""
    else:
        assert not is_check_passed
        if test_case == TestCase.BoundaryInconsistent:
            assert issue_report == f"    Minimum boundary value {minimum} is greater than maximum value {maximum}!\n"
        elif test_case == TestCase.ExceedLowerLimit:
            assert "minimum value" in issue_report
        elif test_case == TestCase.ExceedUpperLimit:
            assert "maximum value" in issue_report
        assert "test_parameter" in issue_report or test_case == TestCase.BoundaryInconsistent

#########################################################################################################
# test of check_float_value_list
#########################################################################################################

def test_check_float_value_list(caplog: LogCaptureFixture) -> None:
    """Test the method check_float_value_list.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    """
    is_check_passed, issue_report = test_module.BoundaryCheck.check_float_value_list(
        0, 100, [(1, "a"), (-1, "b"), (101, "c")], c_flag.check_inclusive, c_flag.check_inclusive)
    assert not is_check_passed
    assert "Parameter b" in issue_report
    assert "Parameter c" in issue_report
    assert "Parameter a" not in issue_report

    with caplog.at_level(logging.INFO):
        is_check_passed, issue_report = test_module.BoundaryCheck.check_float_value_list(
            0, 100, [], c_flag.check_inclusive, c_flag.check_inclusive)
    assert is_check_passed
    assert issue_report == ""
    assert caplog.records[0].message == "List is empty. There is not performed any check!"
