"""
fhfa_hpi: FHFA quarterly house price indexes for lookups by geography and quarter

This package loads the FHFA non-seasonally adjusted quarterly HPI tables
(zip3, metro, nonmetro, state, us, pr, mh) and finds index values and index
ratios for individual geographies and dates. Dates are ints in CCYYQ format.
"""

__version__ = "0.1.0"
__author__ = "FHFA HPI Implementation Team"

from .core.quarters import to_yrqtr, to_date, qtr_diff, next_qtr, qtrs_ok, qtr_range
from .models import HPISeries, HPIData
from .aggregation import best, BestMatcher
from .data import build_dataset, detect_geo_level, load, load_many, fetch

__all__ = [
    "to_yrqtr",
    "to_date",
    "qtr_diff",
    "next_qtr",
    "qtrs_ok",
    "qtr_range",
    "HPISeries",
    "HPIData",
    "best",
    "BestMatcher",
    "build_dataset",
    "detect_geo_level",
    "load",
    "load_many",
    "fetch"
]
