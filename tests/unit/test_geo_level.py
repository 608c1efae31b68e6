"""Unit tests for geography class detection."""

import pytest

from fhfa_hpi.data.geo_level import detect_geo_level, is_geo_level
from fhfa_hpi.config.constants import UNKNOWN_GEO_LEVEL, GEO_LEVELS


@pytest.mark.parametrize("header,expected", [
    ("Three-Digit ZIP Code Quarterly Index", "zip3"),
    ("House Price Indexes for Metropolitan Areas and Divisions", "metro"),
    ("Areas Not in Metropolitan Statistical Areas", "nonmetro"),
    ("The 50 States and the District of Columbia", "state"),
    ("HPI for the USA and Census Divisions", "us"),
    ("House Price Index: Puerto Rico", "pr"),
    ("MANUFACTURED HOMES", "mh"),
])
def test_detect(header, expected):
    assert detect_geo_level(header) == expected


def test_unknown_is_sentinel():
    assert detect_geo_level("County-level developmental index") == UNKNOWN_GEO_LEVEL
    assert detect_geo_level("") == UNKNOWN_GEO_LEVEL
    assert detect_geo_level(None) == UNKNOWN_GEO_LEVEL
    assert not is_geo_level(UNKNOWN_GEO_LEVEL)


def test_all_levels_valid():
    for level in GEO_LEVELS:
        assert is_geo_level(level)
    assert len(GEO_LEVELS) == 7
