"""All index series for one geography class."""

from datetime import date
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union
import logging

import pandas as pd

from .series import HPISeries
from ..config.constants import GEO_LEVELS
from ..utils.exceptions import (
    GeoNotFoundError,
    InvalidArgumentsError,
    UnrecognizedGeoLevelError,
)

logger = logging.getLogger(__name__)


class HPIData:
    """Index series for every geography at one level (e.g. all states).

    Series are kept in the order they were added, which for loaded tables is
    the order the geographies appear in the source sheet.
    """

    def __init__(self, geo_level: str, series: Optional[Mapping[str, HPISeries]] = None):
        if geo_level not in GEO_LEVELS:
            raise UnrecognizedGeoLevelError(
                f"Invalid geo level: {geo_level}. Valid options are: {GEO_LEVELS}"
            )

        self._geo_level = geo_level
        self._series: Dict[str, HPISeries] = dict(series or {})

    @property
    def geo_level(self) -> str:
        """Aggregation level of the data (e.g. metro, nonmetro, state)."""
        return self._geo_level

    def __len__(self) -> int:
        return len(self._series)

    def __contains__(self, geo: str) -> bool:
        return geo in self._series

    def __iter__(self) -> Iterator[HPISeries]:
        return iter(self._series.values())

    def __repr__(self) -> str:
        return f"HPIData(geo_level={self._geo_level!r}, n_geos={len(self)})"

    def geo(self, geo: str) -> HPISeries:
        """Series for location ``geo`` (e.g. TX)."""
        try:
            return self._series[geo]
        except KeyError:
            raise GeoNotFoundError(f"Geo {geo} not found in {self._geo_level} data") from None

    def geos(self) -> List[str]:
        """Geography keys (state postal codes, CBSA codes, ...)."""
        return list(self._series)

    def index(self, geo: str, dt: int) -> float:
        """House price index for ``geo`` at ``dt`` (CCYYQ)."""
        return self.geo(geo).index(dt)

    def change(self, geo: str, dt_start: int, dt_end: int) -> float:
        """Ratio of the index at ``dt_end`` to ``dt_start`` for ``geo``."""
        return self.geo(geo).change(dt_start, dt_end)

    def change_time(self, geo: str, date_start: date, date_end: date) -> float:
        return self.geo(geo).change_time(date_start, date_end)

    def last(self, geo: str) -> Tuple[Optional[int], Optional[float]]:
        """Date and value of the last quarter that was loaded, not appended."""
        return self.geo(geo).last()

    def append(self, other: "HPIData") -> None:
        """
        Extend every series with the matching series of ``other``.

        Parameters
        ----------
        other : HPIData
            Data at the same geo level holding the quarters that follow
            each series in this dataset

        Raises
        ------
        InvalidArgumentsError
            If the geo levels differ
        GeoNotFoundError
            If ``other`` lacks a geo present here
        DiscontinuousAppendError
            If any extension does not continue its series

        Nothing is modified unless every series can be extended.
        """
        if self._geo_level != other.geo_level:
            raise InvalidArgumentsError(
                f"Geo level not the same in append: {self._geo_level} vs {other.geo_level}"
            )

        extensions = {}
        for key, series in self._series.items():
            if key not in other:
                raise GeoNotFoundError(f"Cannot find geo {key} in append data")
            extensions[key] = series.check_append(*other.geo(key).data())

        for key, (dates, values) in extensions.items():
            self._series[key].append(dates, values)

        logger.info(f"Appended {len(extensions)} {self._geo_level} series")

    def copy(self) -> "HPIData":
        """Independent copy of the data."""
        return HPIData(
            self._geo_level,
            {key: series.copy() for key, series in self._series.items()}
        )

    def to_frame(self) -> pd.DataFrame:
        """Long-format frame with one row per geo and quarter."""
        from ..data.export import to_frame
        return to_frame(self)

    def save(self, filepath: Union[str, Path]) -> None:
        """Save the data as CSV."""
        from ..data.export import save
        save(self, filepath)
