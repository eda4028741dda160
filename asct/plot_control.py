"""Plot the optimization results."""
# python libraries
import os
import logging

# 3rd party libraries
from matplotlib import pyplot as plt

# own libraries
from asct.circuit_dtos import OptimizationResult, TradeOffPoint

logger = logging.getLogger(__name__)


class ParetoPlots:
    """Generate PDF plots of the optimization results in the power/gain plane."""

    @staticmethod
    def generate_pdf_pareto(x_values_list: list, y_values_list: list, color_list: list, alpha: float,
                            x_label: str, y_label: str, label_list: list[str | None], fig_name: str) -> str:
        """
        Generate multiple Pareto plots in one PDF file.

        :param x_values_list: list of different Pareto plot x values
        :type x_values_list: list
        :param y_values_list: list of different Pareto plot y values
        :type y_values_list: list
        :param color_list: color of each Pareto plot
        :type color_list: list
        :param alpha: The alpha blending value, between 0 (transparent) and 1 (opaque).
        :type alpha: float
        :param x_label: x label of the Pareto plot
        :type x_label: str
        :param y_label: y label of the Pareto plot
        :type y_label: str
        :param label_list: list of different Pareto plot labels in a legend
        :type label_list: list[str | None]
        :param fig_name: filename, will be saved as pdf
        :type fig_name: str
        :return: file name of the pdf
        :rtype: str
        """
        fig = plt.figure(figsize=(80 / 25.4, 80 / 25.4), dpi=350)
        for count, x_values in enumerate(x_values_list):
            plt.scatter(x_values, y_values_list[count], color=color_list[count], alpha=alpha, label=label_list[count])

        if any(label is not None for label in label_list):
            plt.legend()
        plt.xlabel(x_label)
        plt.ylabel(y_label)
        plt.grid()
        plt.tight_layout()
        # make sure to not generate a filename.pdf.pdf (twice ".pdf").
        fig_name = fig_name.replace(".pdf", "")
        pdf_filepath = f"{fig_name}.pdf"
        plt.savefig(pdf_filepath)
        plt.close(fig)
        return pdf_filepath

    @staticmethod
    def plot_optimization_result(result: OptimizationResult, directory: str, fig_name: str = "pareto_front",
                                 selected_point: TradeOffPoint | None = None) -> str:
        """
        Plot all design points and the Pareto front.

        :param result: optimization result
        :type result: OptimizationResult
        :param directory: directory of the pdf file
        :type directory: str
        :param fig_name: file name without extension
        :type fig_name: str
        :param selected_point: design point to highlight
        :type selected_point: TradeOffPoint | None
        :return: file name of the pdf
        :rtype: str
        """
        x_values_list = [[point.metrics.power for point in result.all_points],
                         [point.metrics.power for point in result.pareto_front]]
        y_values_list = [[point.metrics.gain for point in result.all_points],
                         [point.metrics.gain for point in result.pareto_front]]
        color_list = ["gray", "blue"]
        label_list: list[str | None] = ["all points", "Pareto front"]

        if selected_point is not None:
            x_values_list.append([selected_point.metrics.power])
            y_values_list.append([selected_point.metrics.gain])
            color_list.append("orange")
            label_list.append(f"selected {selected_point.id}")

        os.makedirs(directory, exist_ok=True)
        pdf_filepath = ParetoPlots.generate_pdf_pareto(x_values_list, y_values_list, color_list=color_list, alpha=0.7,
                                                       x_label="power / mW", y_label="gain / dB", label_list=label_list,
                                                       fig_name=os.path.join(directory, fig_name))
        logger.info(f"Pareto plot {pdf_filepath} written.")
        return pdf_filepath
