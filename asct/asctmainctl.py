"""Main control program to optimize the sizing of an analog circuit."""
# python libraries
import configparser
import logging
import logging.config
import os
import sys
import tomllib
from typing import Any

# 3rd party libraries

# own libraries
from asct import toml_checker as tc
from asct.boundary_check import BoundaryCheck, CheckCondition as c_flag
from asct.circuit_dtos import Constraints, GraphData, Hyperparameters, OptimizationResult, PerformanceMetrics
from asct.circuit_enums import AlgorithmEnum, OptimizationTarget, SamplingEnum, SearchModeEnum
from asct.circuit_optimization import run_optimization, select_representative_point
from asct.generate_toml import check_for_missing_toml_files, generate_logging_config, FLOW_CONTROL_FILENAME, LOGGING_CONFIGURATION_FILENAME
from asct.history import RunHistory
from asct.netlist_parser import create_graph_data
from asct.sample_circuits import get_sample_circuit, SAMPLE_CIRCUIT_LIST
from asct.summary_processing import save_results

logger = logging.getLogger(__name__)


class AsctMainCtl:
    """Main class to control the circuit sizing optimization."""

    def __init__(self) -> None:
        """Initialize the member variable of the AsctMainCtl-class."""
        self._history: RunHistory = RunHistory()
        self._graph_data: GraphData | None = None

    @property
    def history(self) -> RunHistory:
        """Return the history of the runs."""
        return self._history

    @property
    def graph_data(self) -> GraphData | None:
        """Return the parsed topology of the last run."""
        return self._graph_data

    @staticmethod
    def load_toml_file(toml_file: str) -> tuple[bool, dict[str, Any]]:
        """
        Load the toml configuration data to a dictionary.

        :param toml_file : File name of the toml-file
        :type  toml_file : str
        :return: True, if the data could be loaded successful and the loaded dictionary
        :rtype: tuple[bool, dict[str, Any]]
        """
        is_toml_file_existing = False
        config: dict[str, Any] = {}

        toml_file_directory = os.path.dirname(toml_file)

        if os.path.exists(toml_file_directory) or toml_file_directory == "":
            if os.path.isfile(toml_file):
                with open(toml_file, "rb") as f:
                    try:
                        config = tomllib.load(f)
                        is_toml_file_existing = True
                    except tomllib.TOMLDecodeError as e:
                        # File is not conform to toml-format
                        logger.warning(f"toml-file is not conform to toml-format:\n{e}")
            else:
                logger.warning(f"File {toml_file} does not exists!")
        else:
            logger.warning(f"Path {toml_file_directory} does not exists!")

        return is_toml_file_existing, config

    @staticmethod
    def load_generate_logging_config(logging_config_file: str) -> None:
        """
        Read the logging configuration file and configure the logger.

        Generate a default logging configuration file in case it does not exist.

        :param logging_config_file: File name of the logging configuration file
        :type logging_config_file: str
        """
        logging_conf_file_directory = os.path.dirname(logging_config_file)

        if os.path.exists(logging_conf_file_directory) or logging_conf_file_directory == "":
            if os.path.isfile(logging_config_file):
                try:
                    logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
                except (configparser.Error, KeyError, ValueError, TypeError) as exc:
                    logger.warning(f"Logging configuration file {logging_config_file} is inconsistent: {exc}")
                else:
                    logger.info(f"Found existing logging configuration {logging_config_file}.")
            else:
                logger.info("Generate a new logging.conf file.")
                generate_logging_config(logging_conf_file_directory)
                # Reset to standard file name
                logging_config_file = os.path.join(logging_conf_file_directory, LOGGING_CONFIGURATION_FILENAME)
                if os.path.isfile(logging_config_file):
                    logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
                else:
                    raise ValueError("logging.conf can not be generated.")
        else:
            logger.warning(f"Path {logging_conf_file_directory} does not exists!")

    @staticmethod
    def verify_circuit_parameter(toml_circuit: tc.TomlCircuitConf) -> tuple[bool, str]:
        """Verify the input parameter ranges.

        :param toml_circuit: toml circuit configuration
        :type toml_circuit: tc.TomlCircuitConf
        :return: True, if the configuration is inconsistent, and the report of the issues
        :rtype: tuple[bool, str]
        """
        inconsistency_report: str = ""
        is_inconsistent: bool = False

        # Topology: sample circuit or netlist
        if toml_circuit.topology.sample_circuit != "":
            sample_circuit_id_list = [circuit_info.id for circuit_info in SAMPLE_CIRCUIT_LIST]
            if toml_circuit.topology.sample_circuit not in sample_circuit_id_list:
                inconsistency_report += (f"    Sample circuit '{toml_circuit.topology.sample_circuit}' does not match any of "
                                         f"{sample_circuit_id_list}!\n")
                is_inconsistent = True
        elif toml_circuit.topology.netlist.strip() == "":
            inconsistency_report += "    Topology: Neither sample_circuit nor netlist is provided!\n"
            is_inconsistent = True

        # Population size and iterations
        toml_check_value_list = [(float(toml_circuit.optimization.population_size), "population_size"),
                                 (float(toml_circuit.optimization.iterations), "iterations")]
        is_check_passed, issue_report = BoundaryCheck.check_float_value_list(
            0, sys.float_info.max, toml_check_value_list, c_flag.check_inclusive, c_flag.check_ignore)
        if not is_check_passed:
            inconsistency_report += issue_report
            is_inconsistent = True

        # Baseline gain and power are reference values of the iterative search
        toml_check_value_list = [(toml_circuit.baseline.gain, "baseline.gain"),
                                 (toml_circuit.baseline.power, "baseline.power")]
        is_check_passed, issue_report = BoundaryCheck.check_float_value_list(
            0, sys.float_info.max, toml_check_value_list, c_flag.check_exclusive, c_flag.check_ignore)
        if not is_check_passed:
            inconsistency_report += issue_report
            is_inconsistent = True

        toml_check_value_list = [(toml_circuit.baseline.bandwidth, "baseline.bandwidth"),
                                 (toml_circuit.baseline.slew_rate, "baseline.slew_rate"),
                                 (toml_circuit.baseline.noise_figure, "baseline.noise_figure")]
        is_check_passed, issue_report = BoundaryCheck.check_float_value_list(
            0, sys.float_info.max, toml_check_value_list, c_flag.check_inclusive, c_flag.check_ignore)
        if not is_check_passed:
            inconsistency_report += issue_report
            is_inconsistent = True

        return is_inconsistent, inconsistency_report

    @staticmethod
    def get_run_parameters(toml_circuit: tc.TomlCircuitConf) -> tuple[OptimizationTarget, Constraints, Hyperparameters, PerformanceMetrics]:
        """
        Convert the toml circuit configuration to the optimization input.

        :param toml_circuit: toml circuit configuration
        :type toml_circuit: tc.TomlCircuitConf
        :return: target, constraints, hyperparameters, baseline metrics
        :rtype: tuple[OptimizationTarget, Constraints, Hyperparameters, PerformanceMetrics]
        """
        target = OptimizationTarget(toml_circuit.optimization.target)
        constraints = Constraints(max_power=toml_circuit.constraints.max_power, max_noise=toml_circuit.constraints.max_noise)
        hyperparameters = Hyperparameters(
            algorithm=AlgorithmEnum(toml_circuit.optimization.algorithm),
            iterations=toml_circuit.optimization.iterations,
            population_size=toml_circuit.optimization.population_size,
            random_seed=toml_circuit.optimization.random_seed,
            sampling_method=SamplingEnum(toml_circuit.optimization.sampling_method),
            search_mode=SearchModeEnum(toml_circuit.optimization.search_mode))
        baseline = PerformanceMetrics(
            gain=toml_circuit.baseline.gain,
            bandwidth=toml_circuit.baseline.bandwidth,
            power=toml_circuit.baseline.power,
            slew_rate=toml_circuit.baseline.slew_rate,
            noise_figure=toml_circuit.baseline.noise_figure)
        return target, constraints, hyperparameters, baseline

    @staticmethod
    def load_topology(toml_topology: tc.TomlTopology) -> GraphData:
        """
        Parse the topology of the configuration.

        :param toml_topology: sample circuit id or netlist and ports
        :type toml_topology: tc.TomlTopology
        :return: components and connectivity graph
        :rtype: GraphData
        """
        if toml_topology.sample_circuit != "":
            circuit_info = get_sample_circuit(toml_topology.sample_circuit)
            logger.info(f"Use sample circuit '{circuit_info.name}'.")
            return create_graph_data(circuit_info.netlist, circuit_info.ports)
        return create_graph_data(toml_topology.netlist, toml_topology.ports)

    def run_optimization_from_toml_configurations(self, workspace_path: str) -> OptimizationResult:
        """Perform the main program.

        This function corresponds to 'main', which is called after the instance of the class is created.

        :param  workspace_path: Path to subfolder 'workspace' (if empty default path '../<path to this file>' is used)
        :type   workspace_path: str
        :return: result of the optimization
        :rtype: OptimizationResult
        """
        if workspace_path == "":
            workspace_path = os.path.dirname(os.path.abspath(__file__))
            workspace_path = os.path.join(os.path.dirname(workspace_path), "workspace")

        workspace_path = os.path.abspath(workspace_path)
        if not os.path.isdir(workspace_path):
            raise ValueError(f"Error: Workspace folder {workspace_path} does not exists!")

        # --------------------------
        # Logging
        # --------------------------
        self.load_generate_logging_config(os.path.join(workspace_path, LOGGING_CONFIGURATION_FILENAME))

        # --------------------------
        # Flow control
        # --------------------------
        logger.debug("Read flow control file")
        check_for_missing_toml_files(workspace_path)
        flow_control_loaded, dict_prog_flow = self.load_toml_file(os.path.join(workspace_path, FLOW_CONTROL_FILENAME))
        if not flow_control_loaded:
            raise ValueError("Program flow toml file does not exist.")
        toml_prog_flow = tc.FlowControl(**dict_prog_flow)

        project_directory = os.path.join(workspace_path, toml_prog_flow.general.project_directory)
        results_directory = os.path.join(project_directory, toml_prog_flow.results.subdirectory)

        if toml_prog_flow.history.capacity != self._history.capacity:
            self._history = RunHistory(toml_prog_flow.history.capacity)

        # --------------------------
        # Circuit configuration
        # --------------------------
        logger.debug("Read circuit configuration")
        circuit_configuration_file = toml_prog_flow.configuration_data_files.circuit_configuration_file
        is_circuit_loaded, dict_circuit = self.load_toml_file(os.path.join(workspace_path, circuit_configuration_file))
        if not is_circuit_loaded:
            raise ValueError(f"Circuit configuration file: {circuit_configuration_file} does not exist.")
        toml_circuit = tc.TomlCircuitConf(**dict_circuit)

        is_inconsistent, issue_report = self.verify_circuit_parameter(toml_circuit)
        if is_inconsistent:
            raise ValueError(f"Circuit parameter in file {circuit_configuration_file} are inconsistent!\n{issue_report}")

        # --------------------------
        # Optimization
        # --------------------------
        self._graph_data = self.load_topology(toml_circuit.topology)
        logger.info(f"Topology with {len(self._graph_data.components)} components, {len(self._graph_data.nodes)} nodes "
                    f"and {len(self._graph_data.links)} links.")

        target, constraints, hyperparameters, baseline = self.get_run_parameters(toml_circuit)
        logger.info("Start circuit optimization.")
        result = run_optimization(self._graph_data.components, target, constraints, hyperparameters, baseline)

        if not result.is_population_generated:
            logger.warning("No design point generated. Check population_size and iterations!")

        self._history.add(target, constraints, result.pareto_front)
        selected_point = select_representative_point(result.pareto_front)
        if selected_point is not None:
            logger.info(f"Selected design point {selected_point.id}: {selected_point.metrics}")

        # --------------------------
        # Results
        # --------------------------
        study_name = circuit_configuration_file.replace(".toml", "")
        save_results(result, results_directory, study_name, selected_point, is_plot=toml_prog_flow.results.is_plot)

        return result


# Program flow control of the circuit sizing optimization
if __name__ == "__main__":
    arg1 = ""

    asct_mctl = AsctMainCtl()
    arguments = sys.argv

    # Check on argument, which corresponds to the parent folder of the workspace
    if len(arguments) > 1:
        arg1 = os.path.abspath(os.path.join(arguments[1], "workspace"))
        if not os.path.exists(arg1):
            print(f"Provided argument {arguments[1]} does not contain the subfolder 'workspace'. Program will use the default path!")
            arg1 = ""

    asct_mctl.run_optimization_from_toml_configurations(arg1)
