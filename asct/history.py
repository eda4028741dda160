"""Bounded history of optimization runs."""
# python libraries
import collections
import copy
import datetime
import itertools
import logging

# 3rd party libraries

# own libraries
from asct.circuit_dtos import Constraints, HistoryEntry, TradeOffPoint
from asct.circuit_enums import OptimizationTarget
from asct.circuit_optimization import select_representative_point

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY: int = 10


class RunHistory:
    """Keep the last optimization runs, newest first. The oldest entry is dropped beyond the capacity."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        """
        Initialize the history.

        :param capacity: maximum number of entries, at least 1
        :type capacity: int
        """
        if capacity < 1:
            raise ValueError(f"History capacity {capacity} is less than 1.")
        self._entries: collections.deque[HistoryEntry] = collections.deque(maxlen=capacity)
        self._id_counter = itertools.count(1)

    @property
    def capacity(self) -> int:
        """Return the maximum number of entries."""
        return self._entries.maxlen  # type: ignore

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, target: OptimizationTarget, constraints: Constraints, pareto_front: list[TradeOffPoint]) -> HistoryEntry:
        """
        Store a snapshot of a run.

        :param target: optimization target of the run
        :type target: OptimizationTarget
        :param constraints: constraints of the run (copied)
        :type constraints: Constraints
        :param pareto_front: Pareto front of the run
        :type pareto_front: list[TradeOffPoint]
        :return: new history entry
        :rtype: HistoryEntry
        """
        entry = HistoryEntry(id=next(self._id_counter), timestamp=datetime.datetime.now(), target=target,
                             constraints=copy.deepcopy(constraints), pareto_front=list(pareto_front))
        if len(self._entries) == self.capacity:
            logger.debug(f"History is full. Entry {self._entries[-1].id} is dropped.")
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> list[HistoryEntry]:
        """Return the entries, newest first."""
        return list(self._entries)

    def find(self, entry_id: int) -> HistoryEntry | None:
        """
        Find an entry by its id.

        :param entry_id: id of the entry
        :type entry_id: int
        :return: entry or None, if the entry is not (or no longer) available
        :rtype: HistoryEntry | None
        """
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def revert(self, entry_id: int) -> tuple[HistoryEntry, TradeOffPoint | None]:
        """
        Recall a previous run and select its representative design point.

        :param entry_id: id of the entry
        :type entry_id: int
        :return: copy of the entry, representative point of its Pareto front
        :rtype: tuple[HistoryEntry, TradeOffPoint | None]
        :raises KeyError: if the entry is not available
        """
        entry = self.find(entry_id)
        if entry is None:
            raise KeyError(f"History entry {entry_id} is not available.")

        entry_copy = copy.deepcopy(entry)
        return entry_copy, select_representative_point(entry_copy.pareto_front)
