import pytest

from terrain_generator import TerrainGenerator


SCENARIO_PARAMS = {
    "name": "Rolling Hills",
    "seed": 42,
    "width": 20,
    "depth": 20,
    "heightScale": 3,
    "segments": 64,
    "octaves": 4,
    "biome": "grass",
}


@pytest.fixture
def generator():
    return TerrainGenerator()


@pytest.fixture
def scenario_params():
    return dict(SCENARIO_PARAMS)


@pytest.fixture
def small_params():
    """A cheap terrain for tests that do not care about resolution."""
    return {"name": "Test Patch", "seed": 7, "segments": 16, "octaves": 3}
