"""Tests for parameter validation and the resolved parameter record."""

import math

import pytest

from terrain_generator import TerrainData, TerrainError, TerrainValidationError
from terrain_generator.parameters import parse_parameters


def test_defaults():
    parameters = parse_parameters({"name": "Plain"})
    assert parameters.width == 20.0
    assert parameters.depth == 20.0
    assert parameters.height_scale == 3.0
    assert parameters.segments == 64
    assert parameters.octaves == 4
    assert parameters.seed is None
    assert parameters.biome == "grass"
    assert parameters.position == (0.0, 0.0, 0.0)


def test_accepts_camel_and_snake_case():
    assert parse_parameters({"name": "A", "heightScale": 7.5}).height_scale == 7.5
    assert parse_parameters({"name": "A", "height_scale": 7.5}).height_scale == 7.5


def test_integral_float_coerces_to_int():
    parameters = parse_parameters({"name": "A", "segments": 64.0, "octaves": 2.0})
    assert parameters.segments == 64
    assert isinstance(parameters.segments, int)


def test_boundaries_are_inclusive():
    parameters = parse_parameters({
        "name": "Edges", "width": 5, "depth": 100, "heightScale": 0.1,
        "segments": 128, "octaves": 1, "seed": -(2**31),
    })
    assert parameters.width == 5.0
    assert parameters.depth == 100.0
    assert parameters.segments == 128
    assert parameters.seed == -(2**31)


def test_name_is_stripped():
    assert parse_parameters({"name": "  Dunes  "}).name == "Dunes"


def test_position_passthrough():
    assert parse_parameters({"name": "A", "position": [1, -2.5, 3]}).position == (1.0, -2.5, 3.0)


@pytest.mark.parametrize("params, parameter", [
    ({"width": 4.9}, "width"),
    ({"width": 100.1}, "width"),
    ({"width": math.nan}, "width"),
    ({"depth": math.inf}, "depth"),
    ({"depth": -20}, "depth"),
    ({"segments": 15}, "segments"),
    ({"segments": 129}, "segments"),
    ({"segments": 64.5}, "segments"),
    ({"segments": True}, "segments"),
    ({"octaves": 0}, "octaves"),
    ({"octaves": 7}, "octaves"),
    ({"biome": "jungle"}, "biome"),
    ({"seed": 2**31}, "seed"),
    ({"seed": -(2**31) - 1}, "seed"),
    ({"seed": 1.5}, "seed"),
    ({"width": "wide"}, "width"),
])
def test_rejects_invalid_values(params, parameter):
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters({"name": "Bad", **params})
    assert excinfo.value.parameter == parameter
    assert str(excinfo.value).startswith(f"{parameter}: ")


@pytest.mark.parametrize("value", [0.05, 20.5, math.nan, False])
def test_rejects_invalid_height_scale(value):
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters({"name": "Bad", "heightScale": value})
    assert excinfo.value.parameter in ("heightScale", "height_scale")


@pytest.mark.parametrize("params", [{}, {"name": ""}, {"name": "   "}, {"name": None}])
def test_name_is_required(params):
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters(params)
    assert excinfo.value.parameter == "name"


def test_rejects_non_finite_position():
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters({"name": "A", "position": [0.0, math.nan, 0.0]})
    assert excinfo.value.parameter.startswith("position")


@pytest.mark.parametrize("field", ["width", "depth", "heightScale", "segments", "seed", "octaves"])
def test_rejects_numeric_strings(field):
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters({"name": "A", field: "20"})
    assert excinfo.value.parameter in (field, "height_scale")
    assert "must be a number" in excinfo.value.message


def test_numeric_string_call_is_rejected_before_generation():
    with pytest.raises(TerrainValidationError):
        parse_parameters({"name": "S", "width": "20", "seed": "42", "segments": "16", "heightScale": "3"})


@pytest.mark.parametrize("position", [[True, 0.0, 0.0], [0.0, "1", 0.0], [0, 0, None]])
def test_rejects_non_numeric_coordinates(position):
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters({"name": "A", "position": position})
    assert excinfo.value.parameter.startswith("position")


def test_integral_float_seed_is_accepted():
    parameters = parse_parameters({"name": "A", "seed": 42.0})
    assert parameters.seed == 42
    assert isinstance(parameters.seed, int)


def test_explicit_null_seed_means_random():
    assert parse_parameters({"name": "A", "seed": None}).seed is None


def test_rejects_short_position():
    with pytest.raises(TerrainValidationError):
        parse_parameters({"name": "A", "position": [1.0, 2.0]})


def test_unknown_biome_message_lists_choices():
    with pytest.raises(TerrainValidationError) as excinfo:
        parse_parameters({"name": "A", "biome": "jungle"})
    for biome in ("grass", "desert", "snow", "rocky", "volcanic"):
        assert biome in excinfo.value.message


def test_validation_error_hierarchy():
    with pytest.raises(TerrainError):
        parse_parameters({"name": "A", "octaves": 9})
    with pytest.raises(ValueError):
        parse_parameters({"name": "A", "octaves": 9})


def test_parameters_are_frozen():
    parameters = parse_parameters({"name": "A"})
    with pytest.raises(Exception):
        parameters.width = 50.0


class TestTerrainData:
    def _data(self):
        return TerrainData(width=20.0, depth=30.0, height_scale=3.0, segments=64,
                           seed=42, octaves=4, biome="snow")

    def test_to_dict_uses_camel_case(self):
        assert self._data().to_dict() == {
            "width": 20.0, "depth": 30.0, "heightScale": 3.0, "segments": 64,
            "seed": 42, "octaves": 4, "biome": "snow",
        }

    def test_to_params_validates(self):
        params = self._data().to_params("Peaks", position=(1.0, 2.0, 3.0))
        parameters = parse_parameters(params)
        assert parameters.seed == 42
        assert parameters.depth == 30.0
        assert parameters.biome == "snow"
        assert parameters.position == (1.0, 2.0, 3.0)
