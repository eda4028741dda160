"""Store the results of an optimization run."""
# python libraries
import os
import logging

# 3rd party libraries
import pandas as pd

# own libraries
from asct.circuit_dtos import OptimizationResult, TradeOffPoint
from asct.exporter import save_cir_file
from asct.pareto import points_to_df
from asct.plot_control import ParetoPlots

logger = logging.getLogger(__name__)

ALL_POINTS_FILENAME = "all_points.csv"
PARETO_FRONT_FILENAME = "pareto_front.csv"


def result_to_df(result: OptimizationResult) -> pd.DataFrame:
    """
    Convert all points of the result to a DataFrame. Pareto front points are marked in column 'is_pareto'.

    :param result: optimization result
    :type result: OptimizationResult
    :return: DataFrame of all points
    :rtype: pd.DataFrame
    """
    return points_to_df(result.all_points, [point.id for point in result.pareto_front])


def save_results(result: OptimizationResult, results_directory: str, study_name: str, selected_point: TradeOffPoint | None,
                 is_plot: bool = True) -> list[str]:
    """
    Save the optimization results.

    Write the csv files of all points and the Pareto front, the circuit file of the selected point
    and optional the Pareto plot to the directory '<results_directory>/<study_name>'.

    :param result: optimization result
    :type result: OptimizationResult
    :param results_directory: results directory
    :type results_directory: str
    :param study_name: name of the study
    :type study_name: str
    :param selected_point: design point to export, no circuit file is written if None
    :type selected_point: TradeOffPoint | None
    :param is_plot: True to generate the Pareto plot
    :type is_plot: bool
    :return: list of written files
    :rtype: list[str]
    """
    study_directory = os.path.join(results_directory, study_name)
    os.makedirs(study_directory, exist_ok=True)
    written_file_list: list[str] = []

    df = result_to_df(result)
    all_points_filepath = os.path.join(study_directory, ALL_POINTS_FILENAME)
    df.to_csv(all_points_filepath, index=False)
    written_file_list.append(all_points_filepath)

    pareto_filepath = os.path.join(study_directory, PARETO_FRONT_FILENAME)
    points_to_df(result.pareto_front).drop(columns="is_pareto").to_csv(pareto_filepath, index=False)
    written_file_list.append(pareto_filepath)

    if selected_point is not None:
        cir_filepath = os.path.join(study_directory, f"{study_name}_{selected_point.id}.cir")
        save_cir_file(selected_point.components, cir_filepath)
        written_file_list.append(cir_filepath)
    else:
        logger.warning("No design point selected. Circuit file is not written!")

    if is_plot:
        written_file_list.append(ParetoPlots.plot_optimization_result(result, study_directory, selected_point=selected_point))

    logger.info(f"Results stored in {study_directory}.")
    return written_file_list
