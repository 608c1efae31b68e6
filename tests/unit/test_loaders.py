"""Unit tests for workbook retrieval and loading."""

import pytest
import requests

from fixtures.sample_grids import write_workbook, GRID_BUILDERS
from fhfa_hpi.config import Settings
from fhfa_hpi.config.constants import FILE_NAMES
from fhfa_hpi.data import loaders
from fhfa_hpi.data.loaders import data_url, fetch, read_grid, load, load_many
from fhfa_hpi.utils.exceptions import DataValidationError, FetchError, UnrecognizedGeoLevelError


class FakeResponse:
    
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code
        
    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def workbook_bytes(temp_dir):
    """Bytes of a state workbook, as the FHFA site would serve it."""
    path = temp_dir / "served.xlsx"
    write_workbook(GRID_BUILDERS["state"](), path)
    return path.read_bytes()


@pytest.fixture
def fake_get(monkeypatch, workbook_bytes):
    calls = []
    
    def _get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse(workbook_bytes)
    
    monkeypatch.setattr(loaders.requests, "get", _get)
    return calls


class TestDataUrl:
    
    def test_known_levels(self):
        assert data_url("state").endswith("hpi_at_state.xlsx")
        assert data_url("US").endswith("hpi_at_us_and_census.xlsx")
        
    def test_unknown_level(self):
        with pytest.raises(UnrecognizedGeoLevelError):
            data_url("county")


class TestFetch:
    
    def test_fetch_saves_file(self, fake_get, workbook_bytes, temp_dir):
        path = fetch("state", temp_dir / "dl" / "state.xlsx", timeout=5)
        
        assert path.read_bytes() == workbook_bytes
        assert fake_get == [(data_url("state"), 5)]
        
    def test_http_error(self, monkeypatch, temp_dir):
        monkeypatch.setattr(loaders.requests, "get", lambda url, timeout=None: FakeResponse(status_code=404))
        with pytest.raises(FetchError, match="404"):
            fetch("metro", temp_dir / "metro.xlsx")
        assert not (temp_dir / "metro.xlsx").exists()
        
    def test_connection_error(self, monkeypatch, temp_dir):
        def _fail(url, timeout=None):
            raise requests.ConnectionError("unreachable")
        
        monkeypatch.setattr(loaders.requests, "get", _fail)
        with pytest.raises(FetchError, match="unreachable"):
            fetch("metro", temp_dir / "metro.xlsx")


class TestReadGrid:
    
    def test_read_grid(self, grids, temp_dir):
        path = temp_dir / "metro.xlsx"
        write_workbook(grids["metro"], path)
        
        grid = read_grid(path)
        
        assert grid[0] == [grids["metro"][0][0]]
        header = next(row for row in grid if len(row) > 2 and row[2] == "Year")
        assert header[1] == "CBSA Code"
        
    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            read_grid(temp_dir / "missing.xlsx")
            
    @pytest.mark.parametrize("filename", ["notes.txt", "broken.xlsx"])
    def test_not_a_workbook(self, temp_dir, filename):
        path = temp_dir / filename
        path.write_text("geo,date,index\n")
        with pytest.raises(DataValidationError, match="Cannot read workbook"):
            read_grid(path)


class TestLoad:
    
    def test_load_path(self, grids, temp_dir):
        path = temp_dir / "anything.xlsx"
        write_workbook(grids["metro"], path)
        
        data = load(path)
        
        assert data.geo_level == "metro"
        assert data.index("10180", 20033) == pytest.approx(128.06)
        
    def test_load_from_data_dir(self, grids, temp_dir, fake_get):
        write_workbook(grids["pr"], temp_dir / FILE_NAMES["pr"])
        
        data = load("pr", Settings(data_dir=str(temp_dir)))
        
        assert data.geo_level == "pr"
        assert fake_get == []
        
    def test_load_downloads_to_temp(self, fake_get):
        data = load("state")
        
        assert data.geo_level == "state"
        assert len(fake_get) == 1
        
    def test_load_uses_cache(self, fake_get, temp_dir):
        settings = Settings(cache_dir=str(temp_dir / "cache"), request_timeout=3.0)
        
        load("state", settings)
        load("state", settings)
        
        assert fake_get == [(data_url("state"), 3.0)]
        assert (temp_dir / "cache" / FILE_NAMES["state"]).exists()
        
    def test_load_many_keeps_order(self, grids, temp_dir):
        for level in ("metro", "nonmetro", "state"):
            write_workbook(grids[level], temp_dir / FILE_NAMES[level])
            
        datasets = load_many(["metro", "nonmetro", "state"], Settings(data_dir=str(temp_dir)))
        
        assert [data.geo_level for data in datasets] == ["metro", "nonmetro", "state"]
