"""Flatten index data into CSV records."""

from pathlib import Path
from typing import Iterator, Union
import csv
import logging

import pandas as pd

from .schemas import validate_export
from ..config.constants import EXPORT_FLOAT_FORMAT

logger = logging.getLogger(__name__)


def _has_code(data) -> bool:
    return any(series.code != series.name for series in data)


def _csv_frame(data) -> pd.DataFrame:
    df = to_frame(data)
    if not _has_code(data):
        df = df.drop(columns="code")
    return df


def _csv_options() -> dict:
    return {
        "index": False,
        "float_format": EXPORT_FLOAT_FORMAT,
        "quoting": csv.QUOTE_MINIMAL,
        "lineterminator": "\n",
    }


def iter_records(data) -> Iterator[str]:
    """
    CSV lines for every geography and quarter, header first.
    
    Geographies are written in sorted key order. The code column is only
    written when codes differ from display names (metro data). Names with
    commas or quotes are quoted and escaped.
    """
    text = _csv_frame(data).to_csv(**_csv_options())
    yield from text.splitlines()


def to_frame(data) -> pd.DataFrame:
    """
    Long-format table of an HPIData.
    
    Returns
    -------
    pd.DataFrame
        Columns geo, code, date, index; validated against export_schema
    """
    frames = []
    for key in sorted(data.geos()):
        series = data.geo(key)
        frames.append(pd.DataFrame({
            "geo": series.name,
            "code": series.code,
            "date": series.dates,
            "index": series.values
        }))
    
    if frames:
        df = pd.concat(frames, ignore_index=True)
    else:
        df = pd.DataFrame({
            "geo": pd.Series(dtype=str),
            "code": pd.Series(dtype=str),
            "date": pd.Series(dtype="int64"),
            "index": pd.Series(dtype="float64")
        })
    
    return validate_export(df)


def save(data, filepath: Union[str, Path]) -> None:
    """
    Save index data as CSV.
    
    Parameters
    ----------
    data : HPIData
        Data to save
    filepath : str or Path
        Output file path
    """
    filepath = Path(filepath)
    
    # Create directory if needed
    filepath.parent.mkdir(parents=True, exist_ok=True)
    
    df = _csv_frame(data)
    df.to_csv(filepath, encoding="utf-8", **_csv_options())
    
    logger.info(f"Saved {len(df):,} {data.geo_level} rows to {filepath}")
