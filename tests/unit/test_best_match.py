"""Unit tests for best-match lookups across geography levels."""

import pytest

from fhfa_hpi.aggregation.best_match import best, BestMatcher, IndexProvider
from fhfa_hpi.models import HPIData, HPISeries
from fhfa_hpi.utils.exceptions import (
    InvalidArgumentsError,
    NoMatchError,
    GeoNotFoundError
)


class TestBest:
    
    def test_metro_preferred(self, cascade):
        value, level = best(20251, ["14260", "ID", "ID", "ID"], cascade)
        assert level == "metro"
        assert value == cascade[0].index("14260", 20251)
        
    def test_falls_through_to_nonmetro(self, cascade):
        value, level = best(20251, ["XXXXX", "ID", "ID", "ID"], cascade)
        assert level == "nonmetro"
        assert value == cascade[1].index("ID", 20251)
        
    def test_falls_through_to_pr(self, cascade):
        _, level = best(20251, ["XXXXX", "PR", "PR", "PR"], cascade)
        assert level == "pr"
        
    def test_date_out_of_range_falls_through(self, cascade):
        # Boise metro data starts in 2001
        _, level = best(20001, ["14260", "ID", "ID", "ID"], cascade)
        assert level == "nonmetro"
        
    def test_order_is_caller_supplied(self, cascade):
        reordered = [cascade[2], cascade[0]]
        _, level = best(20251, ["ID", "14260"], reordered)
        assert level == "state"
        
    def test_no_match(self, cascade):
        with pytest.raises(NoMatchError):
            best(20251, ["XXXXX", "ZZ", "ZZ", "ZZ"], cascade)
            
    def test_no_match_out_of_range(self, cascade):
        with pytest.raises(NoMatchError):
            best(19901, ["14260", "ID", "ID", "PR"], cascade)
            
    def test_length_mismatch(self, cascade):
        with pytest.raises(InvalidArgumentsError):
            best(20251, ["14260", "ID"], cascade)
            
    def test_empty(self):
        with pytest.raises(InvalidArgumentsError):
            best(20251, [], [])
            
    def test_custom_provider(self, cascade):
        class FixedProvider:
            geo_level = "us"
            
            def index(self, geo, dt):
                if geo != "USA":
                    raise GeoNotFoundError(geo)
                return 300.0
                
        provider = FixedProvider()
        assert isinstance(provider, IndexProvider)
        assert best(20251, ["XXXXX", "USA"], [cascade[0], provider]) == (300.0, "us")


class TestBestMatcher:
    
    def test_lookup(self, cascade):
        matcher = BestMatcher(cascade)
        assert matcher.geo_levels == ["metro", "nonmetro", "state", "pr"]
        assert matcher.lookup(20251, ["XXXXX", "ID", "ID", "ID"])[1] == "nonmetro"
        
    def test_change_uses_one_level(self):
        metro = HPIData("metro", {"1": HPISeries("A", "1", [20211, 20212], [10.0, 20.0])})
        state = HPIData("state", {"ID": HPISeries("ID", "ID", [20201, 20202, 20203, 20204, 20211, 20212],
                                                  [1.0, 1.0, 1.0, 1.0, 2.0, 3.0])})
        matcher = BestMatcher([metro, state])
        
        ratio, level = matcher.change(20211, 20212, ["1", "ID"])
        assert (ratio, level) == (2.0, "metro")
        
        # metro lacks 2020Q1, so both ends come from the state series
        ratio, level = matcher.change(20201, 20212, ["1", "ID"])
        assert (ratio, level) == (3.0, "state")
        
    def test_change_no_match(self, cascade):
        with pytest.raises(NoMatchError):
            BestMatcher(cascade).change(19901, 20251, ["XXXXX", "ID", "ID", "PR"])
            
    def test_requires_datasets(self):
        with pytest.raises(InvalidArgumentsError):
            BestMatcher([])
