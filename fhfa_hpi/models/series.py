"""House price index history for a single geography."""

from datetime import date
from typing import Optional, Sequence, Tuple
import logging

import numpy as np

from ..core.quarters import to_yrqtr, next_qtr, qtrs_ok, is_valid_yrqtr
from ..utils.exceptions import (
    DateOutOfRangeError,
    DiscontinuousAppendError,
    InvalidArgumentsError,
    DataValidationError,
)

logger = logging.getLogger(__name__)


class HPISeries:
    """Quarterly index values for one geography (e.g. CA, zip3 837, CBSA 10180).

    Attributes:
        name: Display name; differs from ``code`` only for metro areas
        code: Geography key used for lookups
        dates: Ascending CCYYQ codes
        values: Index values parallel to ``dates``

    The pair returned by :meth:`last` is fixed when the series is built and is
    not moved by :meth:`append`, so forecasts appended later can be measured
    against the last observed value.
    """

    def __init__(
        self,
        name: str,
        code: str,
        dates: Optional[Sequence[int]] = None,
        values: Optional[Sequence[float]] = None
    ):
        self.name = name
        self.code = code

        if dates is None and values is None:
            self._dates = np.empty(0, dtype=np.int64)
            self._values = np.empty(0, dtype=np.float64)
            self._last = None
            return

        dates, values = _as_arrays(dates, values)
        if not qtrs_ok(dates):
            raise InvalidArgumentsError(
                f"Dates for {code} don't increment by quarter"
            )

        self._dates = dates
        self._values = values
        self._last = (int(dates[-1]), float(values[-1]))

    @classmethod
    def from_observations(
        cls,
        name: str,
        code: str,
        dates: Sequence[int],
        values: Sequence[float]
    ) -> "HPISeries":
        """Build a series from published rows.

        Published tables leave some index cells blank, so the dates may skip
        quarters. They must still be strictly increasing.
        """
        dates, values = _as_arrays(dates, values)
        if np.any(np.diff(dates) <= 0):
            raise DataValidationError(
                f"Rows for {code} are not in ascending date order"
            )

        series = cls(name, code)
        series._dates = dates
        series._values = values
        series._last = (int(dates[-1]), float(values[-1]))
        return series

    def __len__(self) -> int:
        return len(self._dates)

    def __repr__(self) -> str:
        if not len(self):
            return f"HPISeries(code={self.code!r}, empty)"
        return (
            f"HPISeries(code={self.code!r}, name={self.name!r}, "
            f"{self.first_date}-{self.last_date}, n={len(self)})"
        )

    @property
    def dates(self) -> np.ndarray:
        """Read-only view of the quarter codes."""
        return _read_only(self._dates)

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the index values."""
        return _read_only(self._values)

    @property
    def first_date(self) -> Optional[int]:
        return int(self._dates[0]) if len(self) else None

    @property
    def last_date(self) -> Optional[int]:
        return int(self._dates[-1]) if len(self) else None

    def _date_index(self, dt: int) -> int:
        """Position of ``dt``, or of the largest date below it.

        Raises DateOutOfRangeError if ``dt`` is outside the stored dates.
        """
        if not len(self):
            raise DateOutOfRangeError(f"No data for {self.code}")

        if dt > self._dates[-1]:
            raise DateOutOfRangeError(
                f"Date {dt} after last date {self.last_date} for {self.code}"
            )

        if dt < self._dates[0]:
            raise DateOutOfRangeError(
                f"Date {dt} before first date {self.first_date} for {self.code}"
            )

        indx = int(np.searchsorted(self._dates, dt, side="left"))

        # carry forward the previous observation if not an exact match
        if self._dates[indx] != dt:
            indx -= 1

        return indx

    def index(self, dt: int) -> float:
        """House price index at ``dt`` (CCYYQ)."""
        return float(self._values[self._date_index(dt)])

    def change(self, dt_start: int, dt_end: int) -> float:
        """Ratio of the index at ``dt_end`` to the index at ``dt_start``."""
        hpi_start = self.index(dt_start)
        hpi_end = self.index(dt_end)
        return hpi_end / hpi_start

    def change_time(self, date_start: date, date_end: date) -> float:
        """Same as :meth:`change` but with calendar dates."""
        return self.change(to_yrqtr(date_start), to_yrqtr(date_end))

    def check_append(self, dates: Sequence[int], values: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
        """Validate an extension without applying it.

        Returns the extension as arrays.
        """
        dates, values = _as_arrays(dates, values)

        if len(self) and (
            not is_valid_yrqtr(self.last_date)
            or int(dates[0]) != next_qtr(self.last_date)
        ):
            raise DiscontinuousAppendError(
                f"Appended dates for {self.code} must start at the quarter "
                f"after {self.last_date}, got {int(dates[0])}"
            )

        if not qtrs_ok(dates):
            raise DiscontinuousAppendError(
                f"Appended dates for {self.code} don't increment by quarter"
            )

        return dates, values

    def append(self, dates: Sequence[int], values: Sequence[float]) -> None:
        """Extend the series. :meth:`last` is unchanged."""
        dates, values = self.check_append(dates, values)

        self._dates = np.concatenate([self._dates, dates])
        self._values = np.concatenate([self._values, values])

        logger.debug(f"Appended {len(dates)} quarters to {self.code}")

    def copy(self) -> "HPISeries":
        """Return an independent copy of the series."""
        dup = HPISeries(self.name, self.code)
        dup._dates, dup._values = self.data()
        dup._last = self._last
        return dup

    def data(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copies of the dates and index values."""
        return self._dates.copy(), self._values.copy()

    def last(self) -> Tuple[Optional[int], Optional[float]]:
        """Date and value of the last quarter present when the series was built."""
        if self._last is None:
            return None, None
        return self._last


def _as_arrays(dates, values) -> Tuple[np.ndarray, np.ndarray]:
    if dates is None or values is None:
        raise InvalidArgumentsError("Dates and values must both be given")

    dates = np.array(dates, dtype=np.int64)
    values = np.array(values, dtype=np.float64)

    if len(dates) == 0 or len(dates) != len(values):
        raise InvalidArgumentsError(
            f"Dates and values don't agree: {len(dates)} dates, {len(values)} values"
        )

    return dates, values


def _read_only(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.setflags(write=False)
    return view
