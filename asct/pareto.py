"""Pareto front extraction (maximize gain, minimize power)."""
# python libraries
import logging

# 3rd party libraries
import numpy as np
import pandas as pd

# own libraries
from asct.circuit_dtos import TradeOffPoint

logger = logging.getLogger(__name__)

METRICS_COLUMN_LIST: list[str] = ["gain", "bandwidth", "power", "slew_rate", "noise_figure"]


def dominates(p2: TradeOffPoint, p1: TradeOffPoint) -> bool:
    """
    Check if p2 dominates p1.

    Only gain (maximize) and power (minimize) are compared. Bandwidth, slew rate and noise figure
    are not part of the dominance test: two points with same gain and power are equally optimal.

    :param p2: design point which may dominate
    :type p2: TradeOffPoint
    :param p1: design point which may be dominated
    :type p1: TradeOffPoint
    :return: True, if p2 is at least as good in both objectives and strictly better in one
    :rtype: bool
    """
    return ((p2.metrics.gain >= p1.metrics.gain and p2.metrics.power < p1.metrics.power)
            or (p2.metrics.gain > p1.metrics.gain and p2.metrics.power <= p1.metrics.power))


def is_pareto_efficient(gain_vec: np.ndarray, power_vec: np.ndarray) -> np.ndarray:
    """
    Find the non-dominated points by sorting by power and sweeping the best gain.

    A point is dominated, if a point with lower power has greater or equal gain,
    or a point with equal power has greater gain.

    :param gain_vec: gain of each point
    :type gain_vec: np.ndarray
    :param power_vec: power of each point
    :type power_vec: np.ndarray
    :return: (n_points, ) boolean mask of the Pareto-efficient points
    :rtype: np.ndarray
    """
    gain_vec = np.asarray(gain_vec, dtype=float)
    power_vec = np.asarray(power_vec, dtype=float)
    n_points = gain_vec.shape[0]
    is_efficient_mask = np.zeros(n_points, dtype=bool)

    sort_index_vec = np.argsort(power_vec, kind="stable")
    best_gain_lower_power = -np.inf

    group_start = 0
    while group_start < n_points:
        # points with equal power form one group
        group_stop = group_start + 1
        while group_stop < n_points and power_vec[sort_index_vec[group_stop]] == power_vec[sort_index_vec[group_start]]:
            group_stop += 1
        group_index_vec = sort_index_vec[group_start:group_stop]
        group_max_gain = np.max(gain_vec[group_index_vec])

        for index in group_index_vec:
            is_efficient_mask[index] = gain_vec[index] > best_gain_lower_power and gain_vec[index] >= group_max_gain

        best_gain_lower_power = max(best_gain_lower_power, group_max_gain)
        group_start = group_stop

    return is_efficient_mask


def pareto_front(feasible_points: list[TradeOffPoint]) -> list[TradeOffPoint]:
    """
    Calculate the Pareto front of the feasible points.

    :param feasible_points: design points satisfying the constraints
    :type feasible_points: list[TradeOffPoint]
    :return: non-dominated points, sorted ascending by power. Points with equal power keep the population order.
    :rtype: list[TradeOffPoint]
    """
    if not feasible_points:
        return []

    gain_vec = np.array([point.metrics.gain for point in feasible_points])
    power_vec = np.array([point.metrics.power for point in feasible_points])

    is_efficient_mask = is_pareto_efficient(gain_vec, power_vec)
    sort_index_vec = np.argsort(power_vec, kind="stable")

    front = [feasible_points[index] for index in sort_index_vec if is_efficient_mask[index]]
    logger.debug(f"Pareto front contains {len(front)} of {len(feasible_points)} feasible points.")
    return front


def points_to_df(points: list[TradeOffPoint], pareto_id_list: list[str] | None = None) -> pd.DataFrame:
    """
    Convert design points to a pandas DataFrame.

    :param points: design points
    :type points: list[TradeOffPoint]
    :param pareto_id_list: ids of the Pareto front points to mark in the column 'is_pareto'
    :type pareto_id_list: list[str] | None
    :return: DataFrame with the columns id, gain, bandwidth, power, slew_rate, noise_figure, is_pareto
    :rtype: pd.DataFrame
    """
    if pareto_id_list is None:
        pareto_id_list = []

    df = pd.DataFrame(
        [[point.id] + [getattr(point.metrics, column) for column in METRICS_COLUMN_LIST] for point in points],
        columns=["id"] + METRICS_COLUMN_LIST)
    df["is_pareto"] = df["id"].isin(pareto_id_list)
    return df


def pareto_front_from_df(df: pd.DataFrame, x: str = "power", y: str = "gain") -> pd.DataFrame:
    """
    Calculate the Pareto front from a pandas DataFrame created by points_to_df.

    :param df: pandas DataFrame
    :type df: pd.DataFrame
    :param x: column to minimize
    :type x: str
    :param y: column to maximize
    :type y: str
    :return: pandas DataFrame with Pareto efficient points, sorted ascending by x
    :rtype: pd.DataFrame
    """
    is_efficient_mask = is_pareto_efficient(df[y].to_numpy(), df[x].to_numpy())
    return df[is_efficient_mask].sort_values(by=x, kind="stable")
