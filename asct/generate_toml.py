"""Generate default toml and logging configuration files."""
# python libraries
import os

FLOW_CONTROL_FILENAME = "progFlow.toml"
CIRCUIT_CONFIGURATION_FILENAME = "CircuitConf.toml"
LOGGING_CONFIGURATION_FILENAME = "logging.conf"


def check_for_missing_toml_files(working_directory: str) -> None:
    """
    Check for missing toml default files. Generate them, if missing.

    :param working_directory: working directory
    :type working_directory: str
    """
    if not os.path.exists(working_directory):
        os.makedirs(working_directory)
    # check for all the toml files
    if not os.path.isfile(os.path.join(working_directory, FLOW_CONTROL_FILENAME)):
        generate_flow_control_toml(working_directory)
    if not os.path.isfile(os.path.join(working_directory, CIRCUIT_CONFIGURATION_FILENAME)):
        generate_circuit_toml(working_directory)


def generate_flow_control_toml(working_directory: str) -> None:
    """
    Generate the default progFlow.toml file.

    :param working_directory: working directory
    :type working_directory: str
    """
    toml_data = f'''
    # Path configuration (relative to the workspace)
    [general]
        project_directory = "project"

    [results]
        subdirectory = "01_results"
        is_plot = true

    [history]
        capacity = 10   # Number of stored runs

    [configuration_data_files]
        circuit_configuration_file = "{CIRCUIT_CONFIGURATION_FILENAME}"
    '''
    with open(os.path.join(working_directory, FLOW_CONTROL_FILENAME), 'w', encoding='utf8') as output:
        output.write(toml_data)


def generate_circuit_toml(working_directory: str) -> None:
    """
    Generate the default CircuitConf.toml file.

    :param working_directory: working directory
    :type working_directory: str
    """
    toml_data = '''
    [topology]
        # Sample circuit id ('five_transistor_ota', 'dynamic_comparator') or netlist and ports
        sample_circuit = "five_transistor_ota"
        netlist = ""
        ports = ""

    [optimization]
        target = "balanced"            # balanced, gain, bandwidth, power, noise
        algorithm = "geneticAlgorithm"  # geneticAlgorithm, simulatedAnnealing
        search_mode = "single_shot"     # single_shot, iterative
        sampling_method = "uniform"     # uniform, latin_hypercube
        iterations = 1000               # Number of trials (iterative search mode only)
        population_size = 100
        random_seed = 42

    [constraints]
        # Empty string: unconstrained
        max_power = ""   # mW
        max_noise = ""   # dB

    [baseline]
        gain = 60           # dB
        bandwidth = 200     # MHz
        power = 1.5         # mW
        slew_rate = 100     # V/us
        noise_figure = 2.0  # dB
    '''
    with open(os.path.join(working_directory, CIRCUIT_CONFIGURATION_FILENAME), 'w', encoding='utf8') as output:
        output.write(toml_data)


def generate_logging_config(working_directory: str) -> None:
    """
    Generate the default logging.conf file.

    :param working_directory: working directory
    :type working_directory: str
    """
    logging_data = """[loggers]
keys=root,asct,optuna

[handlers]
keys=console

[formatters]
keys=simple

[logger_root]
level=WARNING
handlers=console

[logger_asct]
level=INFO
handlers=
qualname=asct
propagate=1

[logger_optuna]
level=WARNING
handlers=
qualname=optuna
propagate=1

[handler_console]
class=StreamHandler
level=NOTSET
formatter=simple
args=(sys.stdout,)

[formatter_simple]
format=%(asctime)s - %(name)s - %(levelname)s - %(message)s
datefmt=%Y-%m-%d %H:%M:%S
"""
    with open(os.path.join(working_directory, LOGGING_CONFIGURATION_FILENAME), 'w', encoding='utf8') as output:
        output.write(logging_data)
