# terrain_generator/__init__.py

# This file makes the 'terrain_generator' directory a Python package.
# It also defines the public API of the package.

from .generator import TerrainGenerator, TerrainObject, create_terrain
from .mesh import TerrainMesh
from .parameters import TerrainData, TerrainError, TerrainParameters, TerrainValidationError

__all__ = [
    "TerrainGenerator",
    "TerrainObject",
    "TerrainMesh",
    "TerrainData",
    "TerrainParameters",
    "TerrainError",
    "TerrainValidationError",
    "create_terrain",
]
