# terrain_generator/export.py

"""
================================================================================
TERRAIN EXPORT UTILITIES
================================================================================
Writers for generated terrains: a top-down PNG preview, a compressed NumPy
archive of the mesh buffers, and a Wavefront OBJ with vertex colors.

The scene-state collaborator owns persistence; these writers serve offline
baking, inspection and regression checks.
================================================================================
"""
import hashlib
import json
import os
import re

import numpy as np
from PIL import Image

from . import color_maps


def slugify(name: str) -> str:
    """A filesystem- and OBJ-safe identifier, e.g. 'Rolling Hills' -> 'rolling_hills'."""
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_") or "terrain"


def mesh_content_hash(terrain) -> str:
    """SHA-256 of the mesh buffers. Equal hashes mean bit-identical meshes."""
    digest = hashlib.sha256()
    for array in (terrain.mesh.positions, terrain.mesh.colors, terrain.mesh.indices):
        digest.update(np.ascontiguousarray(array).tobytes())
    return digest.hexdigest()


def save_heightmap_preview(terrain, file_path: str, scale: int = 4) -> str:
    """
    Saves a top-down PNG of the terrain in its mesh vertex colors. Rows follow the Z
    axis and columns the X axis. Each vertex becomes a `scale` x `scale`
    block of pixels.
    """
    os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
    color_array = color_maps.get_vertex_color_array(terrain.mesh.colors, terrain.terrain_data.segments)

    img = Image.fromarray(np.ascontiguousarray(color_array), 'RGB')
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.NEAREST)
    img.save(file_path, 'PNG')
    return file_path


def save_mesh_npz(terrain, file_path: str) -> str:
    """Saves the mesh buffers, heightfield and parameters to a compressed .npz."""
    os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
    np.savez_compressed(
        file_path,
        positions=terrain.mesh.positions,
        colors=terrain.mesh.colors,
        indices=terrain.mesh.indices,
        heightfield=terrain.heightfield,
        terrain_data=np.array(json.dumps(terrain.terrain_data.to_dict())),
    )
    return file_path


def load_mesh_npz(file_path: str) -> dict:
    """Loads an archive written by save_mesh_npz()."""
    with np.load(file_path) as archive:
        return {
            "positions": archive["positions"],
            "colors": archive["colors"],
            "indices": archive["indices"],
            "heightfield": archive["heightfield"],
            "terrain_data": json.loads(str(archive["terrain_data"])),
        }


def save_mesh_obj(terrain, file_path: str) -> str:
    """
    Saves the mesh as a Wavefront OBJ. Vertex colors use the common
    `v x y z r g b` extension; faces are 1-based.
    """
    os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
    mesh = terrain.mesh
    with open(file_path, 'w') as f:
        # Names may hold line breaks; keep the header to one comment line.
        f.write(f"# {' '.join(terrain.name.split())}\n")
        f.write(f"# seed {terrain.seed}\n")
        f.write(f"o {slugify(terrain.name)}\n")
        for (x, y, z), (r, g, b) in zip(mesh.positions.tolist(), mesh.colors.tolist()):
            f.write(f"v {x:.6f} {y:.6f} {z:.6f} {r:.4f} {g:.4f} {b:.4f}\n")
        for a, b, c in (mesh.indices + 1).tolist():
            f.write(f"f {a} {b} {c}\n")
    return file_path
