# terrain_generator/generator.py

"""
================================================================================
CORE TERRAIN GENERATOR
================================================================================
This module contains the TerrainGenerator class, which turns a set of
createTerrain parameters into a heightfield and a biome-colored grid mesh.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict, optional): Overrides for the tunables in config.py
      ('feature_wavelength', 'noise_origin', 'random_seed_ceiling',
      'biome_color_ramps').
    - logger (optional): A configured Python logging object.
- Inputs (per call to generate()):
    - params (dict): The createTerrain tool-call parameters.
- Outputs:
    - A TerrainObject holding the mesh, heightfield, resolved seed and
      metadata, ready for the scene-state store.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same parameters (including seed) and configuration,
  the heightfield and mesh are bit-identical. The generator keeps no state
  between calls, so one instance can serve concurrent callers.
================================================================================
"""

import logging
import time
import uuid
from dataclasses import dataclass, field

import numpy as np

from . import analysis
from . import color_maps
from . import config as DEFAULTS
from . import heightfield
from . import noise
from .mesh import TerrainMesh, build_grid_mesh
from .parameters import TerrainData, TerrainError, parse_parameters


@dataclass(frozen=True, eq=False)
class TerrainObject:
    """A fully formed terrain, handed over to the scene-state collaborator."""
    id: str
    name: str
    seed: int
    position: tuple
    terrain_data: TerrainData
    mesh: TerrainMesh
    heightfield: np.ndarray = field(repr=False)
    statistics: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """JSON-serializable form of the object."""
        return {
            "id": self.id,
            "name": self.name,
            "seed": self.seed,
            "position": list(self.position),
            "terrainData": self.terrain_data.to_dict(),
            "mesh": self.mesh.to_dict(),
            "statistics": dict(self.statistics),
        }


class TerrainGenerator:
    """
    Generates procedural terrain meshes. Holds only immutable tunables; every
    call to generate() builds its own permutation table, heightfield and mesh.
    """
    def __init__(self, config: dict = None, logger: logging.Logger = None):
        """
        Initializes the terrain generator.

        Args:
            config (dict, optional): User-defined tunables overriding defaults.
            logger (logging.Logger, optional): The logger for all output.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.user_config = config or {}

        # --- Consolidate Configuration ---
        self.settings = {
            'feature_wavelength': self.user_config.get('feature_wavelength', DEFAULTS.TERRAIN_FEATURE_WAVELENGTH),
            'noise_origin': self.user_config.get('noise_origin', DEFAULTS.NOISE_ORIGIN_OFFSET),
            'random_seed_ceiling': self.user_config.get('random_seed_ceiling', DEFAULTS.RANDOM_SEED_CEILING),
            'biome_color_ramps': {
                **DEFAULTS.BIOME_COLOR_RAMPS,
                **self.user_config.get('biome_color_ramps', {}),
            },
        }
        self._check_settings()

        self.logger.debug(
            f"TerrainGenerator initialized (feature wavelength {self.settings['feature_wavelength']}, "
            f"noise origin {self.settings['noise_origin']})"
        )

    def _check_settings(self):
        """Rejects tunables that would make generation ill-defined."""
        wavelength = self.settings['feature_wavelength']
        if not np.isfinite(wavelength) or wavelength <= 0:
            raise TerrainError(f"feature_wavelength must be a positive number, got {wavelength}")
        if not np.isfinite(self.settings['noise_origin']):
            raise TerrainError(f"noise_origin must be finite, got {self.settings['noise_origin']}")
        ceiling = self.settings['random_seed_ceiling']
        if not 0 < ceiling <= DEFAULTS.SEED_MAX + 1:
            raise TerrainError(f"random_seed_ceiling must be in (0, {DEFAULTS.SEED_MAX + 1}], got {ceiling}")

        for biome, ramp in self.settings['biome_color_ramps'].items():
            stops = [point[0] for point in ramp]
            if stops[0] != 0.0 or stops[-1] != 1.0 or any(b <= a for a, b in zip(stops, stops[1:])):
                raise TerrainError(f"Color ramp for '{biome}' must rise strictly from 0.0 to 1.0")

    def resolve_seed(self, seed: int = None) -> int:
        """Returns the given seed, or draws a fresh one if it is None."""
        if seed is not None:
            return seed
        rng = np.random.default_rng()
        return int(rng.integers(0, self.settings['random_seed_ceiling']))

    def build_heightfield(self, terrain_data: TerrainData) -> np.ndarray:
        """Builds the heightfield for an already resolved parameter set."""
        perm = noise.build_permutation_table(terrain_data.seed)
        self.logger.debug(f"Permutation table built for seed {terrain_data.seed}.")
        return heightfield.build_heightfield(
            perm,
            terrain_data.segments,
            terrain_data.height_scale,
            terrain_data.octaves,
            feature_wavelength=self.settings['feature_wavelength'],
            noise_origin=self.settings['noise_origin'],
        )

    def generate(self, params: dict) -> TerrainObject:
        """
        Validates the parameters, then runs the full pipeline:
        seed resolution, permutation table, heightfield, biome colors, mesh.

        Raises:
            TerrainValidationError: If any parameter is invalid. Nothing is
                computed in that case.
        """
        # 1. Validate (fail fast, before any sampling).
        parameters = parse_parameters(params)

        # 2. Resolve the seed so the exact terrain can be reproduced later.
        seed = self.resolve_seed(parameters.seed)
        terrain_data = TerrainData(
            width=parameters.width,
            depth=parameters.depth,
            height_scale=parameters.height_scale,
            segments=parameters.segments,
            seed=seed,
            octaves=parameters.octaves,
            biome=parameters.biome,
        )
        self.logger.info(
            f"Generating terrain '{parameters.name}' ({terrain_data.biome}, "
            f"{terrain_data.width}x{terrain_data.depth}, {terrain_data.segments} segments, "
            f"{terrain_data.octaves} octaves, seed {seed})"
        )
        start_time = time.time()

        # 3. Permutation table and heightfield.
        heights = self.build_heightfield(terrain_data)
        self.logger.debug(f"Height range: [{heights.min():.4f}, {heights.max():.4f}]")

        # 4. Per-vertex biome colors.
        colors = color_maps.colorize_heights(
            heights, terrain_data.biome, ramps=self.settings['biome_color_ramps']
        )

        # 5. Triangulated grid mesh.
        x_grid, z_grid = heightfield.grid_world_coordinates(
            terrain_data.width, terrain_data.depth, terrain_data.segments
        )
        mesh = build_grid_mesh(x_grid, z_grid, heights, colors)

        statistics = analysis.heightfield_statistics(heights, terrain_data.width, terrain_data.depth)
        heights.setflags(write=False)

        terrain = TerrainObject(
            id=uuid.uuid4().hex,
            name=parameters.name,
            seed=seed,
            position=tuple(parameters.position),
            terrain_data=terrain_data,
            mesh=mesh,
            heightfield=heights,
            statistics=statistics,
        )

        elapsed = time.time() - start_time
        self.logger.info(
            f"Created terrain '{terrain.name}' ({mesh.vertex_count} vertices, "
            f"{mesh.triangle_count} triangles) in {elapsed:.3f} seconds."
        )
        return terrain


def create_terrain(params: dict, logger: logging.Logger = None) -> TerrainObject:
    """Generates a terrain with the default configuration."""
    return TerrainGenerator(logger=logger).generate(params)
