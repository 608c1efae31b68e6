"""Retrieve FHFA workbooks and load them as index data."""

from pathlib import Path
from typing import List, Optional, Sequence, Union
import logging
import os
import tempfile
import zipfile

import pandas as pd
import requests

from .parsing import build_dataset
from ..config.constants import GEO_LEVELS, DATA_URLS, FILE_NAMES, DEFAULT_REQUEST_TIMEOUT
from ..config.settings import Settings, get_default_settings
from ..models.dataset import HPIData
from ..utils.exceptions import DataValidationError, FetchError, UnrecognizedGeoLevelError

logger = logging.getLogger(__name__)


def data_url(geo_level: str) -> str:
    """Download URL of the workbook for a geography class."""
    try:
        return DATA_URLS[geo_level.lower()]
    except KeyError:
        raise UnrecognizedGeoLevelError(
            f"Unrecognized series: {geo_level}. Valid options are: {GEO_LEVELS}"
        ) from None


def fetch(
    geo_level: str,
    filepath: Union[str, Path],
    timeout: float = DEFAULT_REQUEST_TIMEOUT
) -> Path:
    """
    Download the FHFA workbook for ``geo_level`` and save it locally.

    Parameters
    ----------
    geo_level : str
        One of zip3, metro, nonmetro, state, us, pr, mh
    filepath : str or Path
        File to create
    timeout : float
        Request timeout in seconds

    Returns
    -------
    Path
        The saved file
    """
    url = data_url(geo_level)
    filepath = Path(filepath)

    logger.info(f"Fetching {geo_level} workbook from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_bytes(response.content)

    logger.info(f"Saved {len(response.content):,} bytes to {filepath}")
    return filepath


def read_grid(filepath: Union[str, Path]) -> List[List[str]]:
    """
    Read the first sheet of a workbook as rows of strings.

    Empty cells become ``""`` and trailing empty cells are dropped, so
    title rows come back short.

    Raises FileNotFoundError for a missing file and DataValidationError
    when the file is not a readable workbook.
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Workbook not found: {filepath}")

    try:
        df = pd.read_excel(filepath, sheet_name=0, header=None, dtype=str)
    except (ValueError, zipfile.BadZipFile) as e:
        raise DataValidationError(f"Cannot read workbook {filepath}: {e}") from e

    df = df.fillna("")

    grid = []
    for row in df.itertuples(index=False, name=None):
        cells = [str(cell) for cell in row]
        while cells and not cells[-1].strip():
            cells.pop()
        grid.append(cells)

    logger.debug(f"Read {len(grid):,} rows from {filepath}")
    return grid


def load(source: Union[str, Path], settings: Optional[Settings] = None) -> HPIData:
    """
    Load index data for one geography class.

    Parameters
    ----------
    source : str or Path
        Path to an FHFA workbook, or one of zip3, metro, nonmetro, state,
        us, pr, mh. A class name is read from ``settings.data_dir`` when a
        local copy exists there, and downloaded otherwise.
    settings : Settings, optional
        Data locations and request timeout

    Returns
    -------
    HPIData
        Index data for the workbook's geography class
    """
    settings = settings or get_default_settings()

    level = str(source).lower()
    if level not in GEO_LEVELS:
        return build_dataset(read_grid(source))

    if settings.data_dir:
        local = Path(settings.data_dir) / FILE_NAMES[level]
        if local.exists():
            return build_dataset(read_grid(local), level)

    if settings.cache_dir:
        cached = Path(settings.cache_dir) / FILE_NAMES[level]
        if not cached.exists():
            fetch(level, cached, timeout=settings.request_timeout)
        return build_dataset(read_grid(cached), level)

    fd, tmp_name = tempfile.mkstemp(suffix=".xlsx")
    os.close(fd)
    try:
        fetch(level, tmp_name, timeout=settings.request_timeout)
        return build_dataset(read_grid(tmp_name), level)
    finally:
        os.remove(tmp_name)


def load_many(
    sources: Sequence[Union[str, Path]],
    settings: Optional[Settings] = None
) -> List[HPIData]:
    """Load several sources, keeping their order (e.g. for best-match lookups)."""
    return [load(source, settings) for source in sources]
