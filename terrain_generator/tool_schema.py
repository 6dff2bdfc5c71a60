# terrain_generator/tool_schema.py

"""
Descriptions of the terrain generator for the conversational layer: the
createTerrain tool definition offered to the language model, and the short
summary used when describing the current scene back to it.
"""

from .parameters import TerrainData, TerrainParameters

CREATE_TERRAIN_TOOL_NAME = "createTerrain"

CREATE_TERRAIN_DESCRIPTION = (
    "Create a procedural terrain mesh with heightmap-based hills/mountains and "
    "biome-based vertex coloring. Returns the created object's ID and name."
)


def create_terrain_tool() -> dict:
    """
    The tool definition, with the input schema generated from the
    TerrainParameters model so bounds and defaults never drift.
    """
    schema = TerrainParameters.model_json_schema(by_alias=True)
    schema.pop("title", None)
    return {
        "name": CREATE_TERRAIN_TOOL_NAME,
        "description": CREATE_TERRAIN_DESCRIPTION,
        "input_schema": schema,
    }


def _format_number(value: float) -> str:
    return f"{value:g}"


def describe_terrain(terrain_data: TerrainData) -> str:
    """One-line scene-context summary, e.g. 'terrain: 20×20, height 3, biome grass, seed 42'."""
    return (
        f"terrain: {_format_number(terrain_data.width)}×{_format_number(terrain_data.depth)}, "
        f"height {_format_number(terrain_data.height_scale)}, "
        f"biome {terrain_data.biome}, seed {terrain_data.seed}"
    )
