"""Boundary check of configuration parameters."""
# python libraries
import enum
import logging

# 3rd party libraries

# own libraries

logger = logging.getLogger(__name__)


class CheckCondition(enum.Enum):
    """Enum for type of check."""

    check_ignore = 0
    check_inclusive = 1
    check_exclusive = 2


class BoundaryCheck:
    """Boundary check for parameter."""

    @staticmethod
    def check_float_value(minimum: float, maximum: float, parameter_value: float, parameter_name: str,
                          check_type_minimum: CheckCondition, check_type_maximum: CheckCondition) -> tuple[bool, str]:
        """
        Verify the value according minimum and maximum.

        :param minimum: Minimum value of the range
        :type  minimum: float
        :param maximum: Maximum value of the range
        :type  maximum: float
        :param parameter_value: Value to check
        :type  parameter_value: float
        :param parameter_name: Name of parameter to mention in inconsistency report, if check fails
        :type  parameter_name: str
        :param check_type_minimum: Type of check to perform according the minimum value
        :type  check_type_minimum: CheckCondition
        :param check_type_maximum: Type of check to perform according the maximum value
        :type  check_type_maximum: CheckCondition
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        is_check_passed: bool = True
        inconsistency_report: str = ""

        if minimum > maximum:
            return False, f"    Minimum boundary value {minimum} is greater than maximum value {maximum}!\n"

        if check_type_minimum == CheckCondition.check_exclusive and parameter_value <= minimum:
            inconsistency_report += f"    Parameter {parameter_name}= {parameter_value} is less equal minimum value {minimum}!\n"
            is_check_passed = False
        elif check_type_minimum == CheckCondition.check_inclusive and parameter_value < minimum:
            inconsistency_report += f"    Parameter {parameter_name}= {parameter_value} is less than minimum value {minimum}!\n"
            is_check_passed = False

        if check_type_maximum == CheckCondition.check_exclusive and parameter_value >= maximum:
            inconsistency_report += f"    Parameter {parameter_name}= {parameter_value} is greater equal maximum value {maximum}!\n"
            is_check_passed = False
        elif check_type_maximum == CheckCondition.check_inclusive and parameter_value > maximum:
            inconsistency_report += f"    Parameter {parameter_name}= {parameter_value} is greater than maximum value {maximum}!\n"
            is_check_passed = False

        return is_check_passed, inconsistency_report

    @staticmethod
    def check_float_value_list(minimum: float, maximum: float, value_list: list[tuple[float, str]],
                               check_type_minimum: CheckCondition, check_type_maximum: CheckCondition) -> tuple[bool, str]:
        """
        Verify the listed values according minimum and maximum.

        :param minimum: Minimum value of the range
        :type  minimum: float
        :param maximum: Maximum value of the range
        :type  maximum: float
        :param value_list: List of values to check and the parameter name
        :type  value_list: list[tuple[float, str]]
        :param check_type_minimum: Type of check to perform according the minimum value
        :type  check_type_minimum: CheckCondition
        :param check_type_maximum: Type of check to perform according the maximum value
        :type  check_type_maximum: CheckCondition
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        is_check_list_passed: bool = True
        inconsistency_list_report: str = ""

        if len(value_list) == 0:
            logger.info("List is empty. There is not performed any check!")

        for parameter_value, parameter_name in value_list:
            is_check_passed, issue_report = BoundaryCheck.check_float_value(
                minimum, maximum, parameter_value, parameter_name, check_type_minimum, check_type_maximum)
            if not is_check_passed:
                inconsistency_list_report += issue_report
                is_check_list_passed = False

        return is_check_list_passed, inconsistency_list_report
