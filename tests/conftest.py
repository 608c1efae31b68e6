"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
import tempfile

from fixtures.sample_grids import GRID_BUILDERS
from fhfa_hpi.data.parsing import build_dataset
from fhfa_hpi.models import HPISeries


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def grids():
    """Fresh sheet grids keyed by geo level."""
    return {level: builder() for level, builder in GRID_BUILDERS.items()}


@pytest.fixture
def datasets(grids):
    """HPIData for every geo level, built from the sample grids."""
    return {level: build_dataset(grid) for level, grid in grids.items()}


@pytest.fixture
def metro_data(datasets):
    return datasets["metro"]


@pytest.fixture
def state_data(datasets):
    return datasets["state"]


@pytest.fixture
def cascade(datasets):
    """Metro, nonmetro, state, pr: the usual preference order."""
    return [datasets[level] for level in ("metro", "nonmetro", "state", "pr")]


@pytest.fixture
def simple_series():
    """Eight quarters from 2020Q1 with round values."""
    dates = [20201, 20202, 20203, 20204, 20211, 20212, 20213, 20214]
    values = [100.0, 102.0, 104.0, 106.0, 108.0, 110.0, 112.0, 114.0]
    return HPISeries("California", "CA", dates, values)
