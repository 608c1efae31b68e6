"""Best available geography lookups across several index datasets."""

from typing import List, Protocol, Sequence, Tuple, runtime_checkable
import logging

from ..utils.exceptions import (
    DateOutOfRangeError,
    GeoNotFoundError,
    InvalidArgumentsError,
    NoMatchError,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IndexProvider(Protocol):
    """Anything that can look up an index value by geography key and date."""

    @property
    def geo_level(self) -> str: ...

    def index(self, geo: str, dt: int) -> float: ...


def best(
    dt: int,
    keys: Sequence[str],
    datasets: Sequence[IndexProvider]
) -> Tuple[float, str]:
    """
    Index value from the first dataset that has data for its key.
    
    The datasets are ordered by preference, say metro then nonmetro then
    state, and ``keys[i]`` is the key to use in ``datasets[i]``.
    
    Parameters
    ----------
    dt : int
        Date of the lookup (CCYYQ)
    keys : sequence of str
        Keys to use in the corresponding datasets
    datasets : sequence of IndexProvider
        Index data ordered by preference
        
    Returns
    -------
    tuple
        ``(index value, geo level of the dataset it came from)``
        
    Raises
    ------
    InvalidArgumentsError
        If keys and datasets are empty or differ in length
    NoMatchError
        If no dataset has the key at ``dt``
    """
    if len(keys) != len(datasets) or len(datasets) == 0:
        raise InvalidArgumentsError(
            f"Need one key per dataset, got {len(keys)} keys and {len(datasets)} datasets"
        )
    
    for key, data in zip(keys, datasets):
        try:
            value = data.index(key, dt)
        except (GeoNotFoundError, DateOutOfRangeError) as e:
            logger.debug(f"No {data.geo_level} match for {key} at {dt}: {e}")
            continue
        
        return value, data.geo_level
    
    raise NoMatchError(f"Geo/date not found in any dataset: keys={list(keys)}, date={dt}")


class BestMatcher:
    """Preference-ordered datasets for repeated best-match lookups.
    
    Attributes:
        datasets: Index data ordered by preference
    """
    
    def __init__(self, datasets: Sequence[IndexProvider]):
        if not datasets:
            raise InvalidArgumentsError("BestMatcher needs at least one dataset")
        self.datasets: List[IndexProvider] = list(datasets)
    
    @property
    def geo_levels(self) -> List[str]:
        return [data.geo_level for data in self.datasets]
    
    def lookup(self, dt: int, keys: Sequence[str]) -> Tuple[float, str]:
        """Best index value at ``dt``; ``keys`` pair with ``datasets``."""
        return best(dt, keys, self.datasets)
    
    def change(self, dt_start: int, dt_end: int, keys: Sequence[str]) -> Tuple[float, str]:
        """
        Index ratio from the first dataset covering both dates.
        
        Both ends come from the same dataset so the ratio is never mixed
        across geography levels.
        """
        if len(keys) != len(self.datasets):
            raise InvalidArgumentsError(
                f"Need one key per dataset, got {len(keys)} keys and {len(self.datasets)} datasets"
            )
        
        for key, data in zip(keys, self.datasets):
            try:
                start = data.index(key, dt_start)
                end = data.index(key, dt_end)
            except (GeoNotFoundError, DateOutOfRangeError):
                continue
            return end / start, data.geo_level
        
        raise NoMatchError(
            f"No dataset covers {dt_start}-{dt_end} for keys={list(keys)}"
        )
