# terrain_generator/parameters.py

"""
================================================================================
TERRAIN PARAMETER CONTRACT
================================================================================
Validation of the parameters received from the tool-calling layer, and the
resolved parameter record stored alongside each generated terrain.

Data Contract:
---------------
- Inputs:
    - A dict using the tool-call's camelCase keys (snake_case is accepted too).
- Outputs:
    - A frozen TerrainParameters model, or a TerrainValidationError whose
      message is meant to be shown to the user verbatim.
- Side Effects: None.
================================================================================
"""

import numbers
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import config as DEFAULTS


class TerrainError(Exception):
    """Base class for all terrain generation errors."""


class TerrainValidationError(TerrainError, ValueError):
    """A generation parameter is missing, non-finite, or out of range."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        self.message = message
        super().__init__(f"{parameter}: {message}" if parameter else message)


def _check_number(value):
    """Rejects strings, booleans and anything else that is not a real number."""
    # bool is an int subclass and would otherwise coerce to 0 or 1.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"must be a number, got {type(value).__name__}")


class TerrainParameters(BaseModel):
    """The createTerrain tool-call contract."""
    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        str_strip_whitespace=True,
        frozen=True,
    )

    name: str = Field(
        ..., min_length=1,
        description="Display name for the terrain (e.g., 'Rolling Hills', 'Volcanic Island')",
    )
    width: float = Field(
        DEFAULTS.WIDTH_RANGE[2], ge=DEFAULTS.WIDTH_RANGE[0], le=DEFAULTS.WIDTH_RANGE[1],
        description="Terrain width in world units (X axis).",
    )
    depth: float = Field(
        DEFAULTS.DEPTH_RANGE[2], ge=DEFAULTS.DEPTH_RANGE[0], le=DEFAULTS.DEPTH_RANGE[1],
        description="Terrain depth in world units (Z axis).",
    )
    height_scale: float = Field(
        DEFAULTS.HEIGHT_SCALE_RANGE[2], ge=DEFAULTS.HEIGHT_SCALE_RANGE[0], le=DEFAULTS.HEIGHT_SCALE_RANGE[1],
        alias="heightScale",
        description="Maximum height of terrain peaks. 1-3 for gentle hills, 5-10 for mountains, "
                    "10-20 for dramatic peaks.",
    )
    segments: int = Field(
        DEFAULTS.SEGMENTS_RANGE[2], ge=DEFAULTS.SEGMENTS_RANGE[0], le=DEFAULTS.SEGMENTS_RANGE[1],
        description="Grid resolution (cells per side). Higher = smoother but heavier.",
    )
    seed: Optional[int] = Field(
        None, ge=DEFAULTS.SEED_MIN, le=DEFAULTS.SEED_MAX,
        description="Random seed for deterministic generation. Omit for random.",
    )
    octaves: int = Field(
        DEFAULTS.OCTAVES_RANGE[2], ge=DEFAULTS.OCTAVES_RANGE[0], le=DEFAULTS.OCTAVES_RANGE[1],
        description="Noise detail layers. 1 = smooth blobs, 4 = natural, 6 = very detailed.",
    )
    biome: str = Field(
        DEFAULTS.DEFAULT_BIOME,
        json_schema_extra={"enum": list(DEFAULTS.BIOMES)},
        description="Color theme: grass (green valleys), desert (sandy dunes), snow (white peaks), "
                    "rocky (gray stone), volcanic (dark with lava).",
    )
    position: tuple[float, float, float] = Field(
        DEFAULTS.DEFAULT_POSITION,
        description="World position [x, y, z].",
    )

    @field_validator("width", "depth", "height_scale", mode="before")
    @classmethod
    def _require_number(cls, value):
        _check_number(value)
        return value

    @field_validator("segments", "seed", "octaves", mode="before")
    @classmethod
    def _require_integer(cls, value):
        if value is None:
            return value
        _check_number(value)
        # Integral floats such as 64.0 are accepted; 64.5 fails the int check.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("position", mode="before")
    @classmethod
    def _require_coordinates(cls, value):
        if isinstance(value, (list, tuple)):
            for coordinate in value:
                _check_number(coordinate)
        return value

    @field_validator("biome")
    @classmethod
    def _known_biome(cls, value: str) -> str:
        if value not in DEFAULTS.BIOMES:
            raise ValueError(f"must be one of {', '.join(DEFAULTS.BIOMES)}")
        return value


def parse_parameters(params: dict) -> TerrainParameters:
    """
    Validates raw tool-call parameters. Fails on the first problem found,
    before any terrain computation happens.
    """
    try:
        return TerrainParameters.model_validate(params)
    except ValidationError as e:
        error = e.errors()[0]
        parameter = ".".join(str(part) for part in error["loc"])
        raise TerrainValidationError(parameter, error["msg"]) from e


@dataclass(frozen=True)
class TerrainData:
    """The resolved parameter set; enough to regenerate the exact terrain."""
    width: float
    depth: float
    height_scale: float
    segments: int
    seed: int
    octaves: int
    biome: str

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "depth": self.depth,
            "heightScale": self.height_scale,
            "segments": self.segments,
            "seed": self.seed,
            "octaves": self.octaves,
            "biome": self.biome,
        }

    def to_params(self, name: str, position: tuple = DEFAULTS.DEFAULT_POSITION) -> dict:
        """Tool-call parameters that reproduce this terrain exactly."""
        params = self.to_dict()
        params["name"] = name
        params["position"] = list(position)
        return params
