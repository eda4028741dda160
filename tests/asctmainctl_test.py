"""Unit tests for class asctmainctl."""

# python libraries
import copy
import logging
import os
import tempfile

# 3rd party libraries
import matplotlib
import pytest
from _pytest.logging import LogCaptureFixture

# own libraries
import asct.toml_checker as tc
from asct.asctmainctl import AsctMainCtl
from asct.circuit_enums import AlgorithmEnum, OptimizationTarget, SearchModeEnum
from asct.generate_toml import (generate_circuit_toml, generate_flow_control_toml, CIRCUIT_CONFIGURATION_FILENAME,
                                FLOW_CONTROL_FILENAME, LOGGING_CONFIGURATION_FILENAME)

matplotlib.use("Agg")

# Enable logger
pytestlogger = logging.getLogger(__name__)

# Circuit configuration base parameter set
test_circuit_conf_base: tc.TomlCircuitConf = tc.TomlCircuitConf(
    topology=tc.TomlTopology(sample_circuit="five_transistor_ota"),
    optimization=tc.TomlOptimization(target="balanced", algorithm="geneticAlgorithm", iterations=100, population_size=20,
                                     random_seed=1),
)

#########################################################################################################
# test of load_toml_file
#########################################################################################################

def test_load_toml_file(caplog: LogCaptureFixture) -> None:
    """Test the method load_toml_file.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        # Valid file
        generate_flow_control_toml(tmpdir)
        is_loaded, config = AsctMainCtl.load_toml_file(os.path.join(tmpdir, FLOW_CONTROL_FILENAME))
        assert is_loaded
        flow_control = tc.FlowControl(**config)
        assert flow_control.configuration_data_files.circuit_configuration_file == CIRCUIT_CONFIGURATION_FILENAME
        assert flow_control.history.capacity == 10

        # Invalid toml format
        invalid_file = os.path.join(tmpdir, "invalid.toml")
        with open(invalid_file, "w", encoding="utf8") as file:
            file.write("[general\nproject_directory = ")
        with caplog.at_level(logging.WARNING):
            is_loaded, config = AsctMainCtl.load_toml_file(invalid_file)
        assert not is_loaded
        assert config == {}
        assert "toml-file is not conform to toml-format" in caplog.text

        # Missing file
        caplog.clear()
        missing_file = os.path.join(tmpdir, "missing.toml")
        with caplog.at_level(logging.WARNING):
            is_loaded, config = AsctMainCtl.load_toml_file(missing_file)
        assert not is_loaded
        assert caplog.records[0].message == f"File {missing_file} does not exists!"

        # Missing path
        caplog.clear()
        with caplog.at_level(logging.WARNING):
            is_loaded, config = AsctMainCtl.load_toml_file(os.path.join(tmpdir, "missing_dir", "file.toml"))
        assert not is_loaded
        assert caplog.records[0].message == f"Path {os.path.join(tmpdir, 'missing_dir')} does not exists!"


def test_generated_circuit_toml() -> None:
    """Test that the generated circuit configuration is valid and consistent."""
    with tempfile.TemporaryDirectory() as tmpdir:
        generate_circuit_toml(tmpdir)
        is_loaded, config = AsctMainCtl.load_toml_file(os.path.join(tmpdir, CIRCUIT_CONFIGURATION_FILENAME))
        assert is_loaded

        toml_circuit = tc.TomlCircuitConf(**config)
        is_inconsistent, issue_report = AsctMainCtl.verify_circuit_parameter(toml_circuit)
        assert not is_inconsistent
        assert issue_report == ""

        target, constraints, hyperparameters, baseline = AsctMainCtl.get_run_parameters(toml_circuit)
        assert target == OptimizationTarget.balanced
        assert hyperparameters.algorithm == AlgorithmEnum.genetic_algorithm
        assert hyperparameters.search_mode == SearchModeEnum.single_shot
        assert hyperparameters.random_seed == 42
        assert constraints.max_power == ""
        assert baseline.gain == 60

#########################################################################################################
# test of verify_circuit_parameter
#########################################################################################################

# test parameter list
@pytest.mark.parametrize("attribute_path, value, error_text", [
    (("optimization", "population_size"), -1, "population_size"),
    (("optimization", "iterations"), -5, "iterations"),
    (("baseline", "gain"), 0, "baseline.gain"),
    (("baseline", "power"), -1.5, "baseline.power"),
    (("baseline", "noise_figure"), -2.0, "baseline.noise_figure"),
    (("topology", "sample_circuit"), "unknown", "Sample circuit 'unknown' does not match"),
])
def test_verify_circuit_parameter(attribute_path: tuple[str, str], value: float | str, error_text: str) -> None:
    """Test the method verify_circuit_parameter.

    :param attribute_path: section and attribute to change
    :type  attribute_path: tuple[str, str]
    :param value: inconsistent value
    :type  value: float | str
    :param error_text: expected part of the report
    :type  error_text: str
    """
    toml_circuit = copy.deepcopy(test_circuit_conf_base)
    setattr(getattr(toml_circuit, attribute_path[0]), attribute_path[1], value)

    is_inconsistent, issue_report = AsctMainCtl.verify_circuit_parameter(toml_circuit)
    assert is_inconsistent
    assert error_text in issue_report


def test_verify_circuit_parameter_missing_topology() -> None:
    """Test that a topology without sample circuit and netlist is inconsistent."""
    toml_circuit = copy.deepcopy(test_circuit_conf_base)
    toml_circuit.topology = tc.TomlTopology()

    is_inconsistent, issue_report = AsctMainCtl.verify_circuit_parameter(toml_circuit)
    assert is_inconsistent
    assert "Neither sample_circuit nor netlist is provided" in issue_report


def test_load_topology_netlist() -> None:
    """Test that a netlist topology is used, if no sample circuit is given."""
    graph_data = AsctMainCtl.load_topology(tc.TomlTopology(netlist="C1 (A VSS) capacitor", ports="A"))
    assert [component.id for component in graph_data.components] == ["C1"]

#########################################################################################################
# test of run_optimization_from_toml_configurations
#########################################################################################################

def test_run_optimization_from_toml_configurations() -> None:
    """Test the complete program flow with the generated default configuration."""
    asct_mctl = AsctMainCtl()

    with tempfile.TemporaryDirectory() as tmpdir:
        workspace_path = os.path.join(tmpdir, "workspace")
        os.makedirs(workspace_path)

        result = asct_mctl.run_optimization_from_toml_configurations(workspace_path)

        # Default files are generated
        for filename in [FLOW_CONTROL_FILENAME, CIRCUIT_CONFIGURATION_FILENAME, LOGGING_CONFIGURATION_FILENAME]:
            assert os.path.isfile(os.path.join(workspace_path, filename))

        assert len(result.all_points) == 100
        assert result.is_feasible_design_found
        assert len(asct_mctl.history) == 1
        assert asct_mctl.history.entries()[0].pareto_front == result.pareto_front
        assert asct_mctl.graph_data is not None

        study_directory = os.path.join(workspace_path, "project", "01_results", "CircuitConf")
        assert os.path.isfile(os.path.join(study_directory, "all_points.csv"))
        assert os.path.isfile(os.path.join(study_directory, "pareto_front.pdf"))

        # Second run with the same seed gives the same result
        result_2 = asct_mctl.run_optimization_from_toml_configurations(workspace_path)
        assert result_2 == result
        assert len(asct_mctl.history) == 2


def test_run_optimization_missing_workspace() -> None:
    """Test that a missing workspace raises a ValueError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ValueError):
            AsctMainCtl().run_optimization_from_toml_configurations(os.path.join(tmpdir, "missing"))
