"""Turn a sheet's string grid into index series.

The published tables have a few title rows followed by a header row
(``... Year, Quarter, Index ...``) and then one row per geography and
quarter. The metro sheet carries an extra leading area-name column before
the CBSA code, which shifts every field one column to the right.

Rows for a geography must be contiguous and in date order; they are never
re-sorted.
"""

from typing import NamedTuple, Optional, Sequence, Tuple
import logging
import math

from .geo_level import detect_geo_level, is_geo_level
from ..config.constants import MIN_ROW_CELLS, HEADER_MARKER
from ..core.quarters import is_valid_yrqtr
from ..models.dataset import HPIData
from ..models.series import HPISeries
from ..utils.exceptions import DataValidationError, UnrecognizedGeoLevelError

logger = logging.getLogger(__name__)


class ParsedRow(NamedTuple):
    """One data row of a sheet."""
    key: str
    name: str
    yrqtr: int
    value: float


def _cell(row: Sequence[str], col: int) -> str:
    return row[col].strip().lower() if col < len(row) else ""


def find_data_start(grid: Sequence[Sequence[str]]) -> Optional[Tuple[int, int]]:
    """
    Locate the header row.
    
    Returns
    -------
    tuple or None
        ``(row_number, offset)`` where ``offset`` is 1 when the sheet has a
        separate area-name column, or None if no header row exists
    """
    for j, row in enumerate(grid):
        if len(row) < MIN_ROW_CELLS:
            continue
        
        if _cell(row, 1) == HEADER_MARKER:
            return j, 0
        
        if _cell(row, 2) == HEADER_MARKER:
            return j, 1
    
    return None


def _parse_int(text: str) -> Optional[int]:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    
    # numeric cells can come through as "2003.0"
    try:
        number = float(text)
    except ValueError:
        return None
    
    if not number.is_integer():
        return None
    return int(number)


def parse_row(row: Sequence[str], offset: int) -> Optional[ParsedRow]:
    """
    Convert a data row to its fields.
    
    Parameters
    ----------
    row : sequence of str
        Cells of one data row
    offset : int
        1 if the sheet has a leading area-name column, else 0
        
    Returns
    -------
    ParsedRow or None
        None when the row has no usable index value; the published
        series have known gaps, or when the year or quarter is not
        a legal quarter code
    """
    if len(row) < MIN_ROW_CELLS + offset:
        return None
    
    year = _parse_int(row[1 + offset])
    qtr = _parse_int(row[2 + offset])
    if year is None or qtr is None:
        return None
    
    try:
        value = float(row[3 + offset])
    except ValueError:
        return None
    
    if not math.isfinite(value) or value == 0:
        return None
    
    yrqtr = 10 * year + qtr
    if not 1 <= qtr <= 4 or not is_valid_yrqtr(yrqtr):
        return None
    
    return ParsedRow(
        key=row[offset].strip(),
        name=row[0].strip(),
        yrqtr=yrqtr,
        value=value
    )


def build_dataset(
    grid: Sequence[Sequence[str]],
    geo_level: Optional[str] = None
) -> HPIData:
    """
    Build an HPIData from one sheet.
    
    Parameters
    ----------
    grid : sequence of rows of str
        Sheet cells; the first cell holds the title text
    geo_level : str, optional
        Geography class; detected from the title if not given
        
    Returns
    -------
    HPIData
        One series per geography, in the order they appear
        
    Raises
    ------
    UnrecognizedGeoLevelError
        If the level is not given and cannot be detected
    DataValidationError
        If the sheet has no header row or a geography's rows are out of
        date order
    """
    if geo_level is None:
        title = grid[0][0] if grid and grid[0] else ""
        geo_level = detect_geo_level(title)
        if not is_geo_level(geo_level):
            raise UnrecognizedGeoLevelError(
                f"Cannot determine geo level from header: {title!r}"
            )
    
    start = find_data_start(grid)
    if start is None:
        raise DataValidationError("No header row with a 'Year' column found")
    header_row, offset = start
    
    names = {}
    dates = {}
    values = {}
    last_key = None
    n_skipped = 0
    
    for row in grid[header_row + 1:]:
        if len(row) < MIN_ROW_CELLS:
            continue
        
        parsed = parse_row(row, offset)
        if parsed is None:
            n_skipped += 1
            continue
        
        if parsed.key != last_key:
            last_key = parsed.key
            if parsed.key in dates:
                logger.warning(f"Rows for {parsed.key} are not contiguous")
            else:
                names[parsed.key] = parsed.name
                dates[parsed.key] = []
                values[parsed.key] = []
        
        dates[parsed.key].append(parsed.yrqtr)
        values[parsed.key].append(parsed.value)
    
    series = {
        key: HPISeries.from_observations(names[key], key, dates[key], values[key])
        for key in dates
    }
    
    logger.info(
        f"Parsed {sum(len(d) for d in dates.values()):,} {geo_level} rows "
        f"into {len(series)} series ({n_skipped} rows skipped)"
    )
    
    return HPIData(geo_level, series)
