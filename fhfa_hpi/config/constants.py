"""Constants for FHFA quarterly house price index tables."""

from types import MappingProxyType

# Geography classes published by FHFA (non-seasonally adjusted, quarterly)
GEO_LEVELS = ("zip3", "metro", "nonmetro", "state", "us", "pr", "mh")

# Returned by the header classifier when no keyword matches
UNKNOWN_GEO_LEVEL = "unknown"

# Header keyword -> geography class. Checked in order against the lower-cased
# title cell of the sheet.
GEO_LEVEL_KEYWORDS = (
    ("three-digit zip", "zip3"),
    ("metropolitan areas", "metro"),
    ("not in metropolitan statistical areas", "nonmetro"),
    ("states and the district of columbia", "state"),
    ("census divisions", "us"),
    ("puerto rico", "pr"),
    ("manufactured homes", "mh"),
)

_BASE_URL = "https://www.fhfa.gov/hpi/download/quarterly_datasets"

FILE_NAMES = MappingProxyType({
    "zip3": "hpi_at_3zip.xlsx",
    "metro": "hpi_at_metro.xlsx",
    "nonmetro": "hpi_at_nonmetro.xlsx",
    "state": "hpi_at_state.xlsx",
    "us": "hpi_at_us_and_census.xlsx",
    "pr": "hpi_at_pr.xlsx",
    "mh": "hpi_at_mh.xlsx",
})

DATA_URLS = MappingProxyType({
    level: f"{_BASE_URL}/{name}" for level, name in FILE_NAMES.items()
})

# Legal year range for year-quarter codes (CCYYQ)
MIN_YEAR = 1960
MAX_YEAR = 2060

# First month of each quarter
QUARTER_START_MONTHS = (1, 4, 7, 10)

# Row layout of the published tables
MIN_ROW_CELLS = 4
HEADER_MARKER = "year"

# Default geography preference for best-match lookups
DEFAULT_PREFERENCE_ORDER = ("metro", "nonmetro", "state", "pr")

# Network
DEFAULT_REQUEST_TIMEOUT = 60.0

# Export
EXPORT_FLOAT_FORMAT = "%.2f"
