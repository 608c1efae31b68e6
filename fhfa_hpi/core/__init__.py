"""Core date arithmetic for FHFA HPI tables."""

from .quarters import (
    to_yrqtr,
    to_date,
    is_valid_yrqtr,
    qtr_diff,
    next_qtr,
    qtrs_ok,
    qtr_range,
)

__all__ = [
    "to_yrqtr",
    "to_date",
    "is_valid_yrqtr",
    "qtr_diff",
    "next_qtr",
    "qtrs_ok",
    "qtr_range",
]
