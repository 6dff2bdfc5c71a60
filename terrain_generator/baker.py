# terrain_generator/baker.py

"""
================================================================================
OFFLINE TERRAIN BAKER
================================================================================
Generates a batch of terrains described in a JSON job file (or on the command
line) and writes their meshes, optional PNG previews and a manifest.json to
an output directory. Jobs are independent, so they run in a process pool.

Usage:
    python bake_terrain.py --config path/to/jobs.json
    python bake_terrain.py --name "Rolling Hills" --seed 42 --biome grass --preview

Job file layout:
    {
        "output_dir": "baked_terrains",
        "generator_settings": {"feature_wavelength": 0.35},
        "terrain_jobs": [{"name": "Rolling Hills", "seed": 42}, ...]
    }
================================================================================
"""
import argparse
import json
import logging
import logging.config
import multiprocessing
import os
import sys
import time

from tqdm import tqdm

from . import config as DEFAULTS
from . import export
from .generator import TerrainGenerator
from .parameters import TerrainError

DEFAULT_OUTPUT_DIR = "baked_terrains"
OUTPUT_FORMATS = ("npz", "obj")

# --- Global variables for worker processes ---
worker_generator = None
worker_output_dir = None
worker_format = None
worker_preview = False


def init_worker(generator_settings: dict, output_dir: str, output_format: str, preview: bool):
    """Initializes the global state for each worker process."""
    global worker_generator, worker_output_dir, worker_format, worker_preview

    worker_logger = logging.getLogger(f"Worker-{os.getpid()}")
    worker_generator = TerrainGenerator(config=generator_settings, logger=worker_logger)
    worker_output_dir = output_dir
    worker_format = output_format
    worker_preview = preview


def terrain_file_stem(name: str, seed: int, content_hash: str) -> str:
    """
    A filesystem-safe file name for a terrain, e.g. 'rolling_hills_42_3f9a01c2'.
    Jobs sharing a name and seed but differing in size or biome get
    different mesh hashes, so their files never overwrite each other.
    """
    return f"{export.slugify(name)}_{seed}_{content_hash[:8]}"


def process_job(job: dict) -> dict:
    """
    Generates and SAVES a single terrain. Returns only minimal metadata, or
    the validation error message for a rejected job.
    """
    try:
        terrain = worker_generator.generate(job)
    except TerrainError as e:
        return {'name': job.get('name') if isinstance(job, dict) else None, 'error': str(e)}

    content_hash = export.mesh_content_hash(terrain)
    stem = terrain_file_stem(terrain.name, terrain.seed, content_hash)
    files = {}
    if worker_format == "obj":
        files['mesh'] = export.save_mesh_obj(terrain, os.path.join(worker_output_dir, f"{stem}.obj"))
    else:
        files['mesh'] = export.save_mesh_npz(terrain, os.path.join(worker_output_dir, f"{stem}.npz"))
    if worker_preview:
        files['preview'] = export.save_heightmap_preview(terrain, os.path.join(worker_output_dir, f"{stem}.png"))

    return {
        'name': terrain.name,
        'seed': terrain.seed,
        'terrain_data': terrain.terrain_data.to_dict(),
        'hash': content_hash,
        'files': {kind: os.path.relpath(path, worker_output_dir) for kind, path in files.items()},
    }


def load_jobs(config_path: str) -> dict:
    """Loads and minimally checks a job file."""
    with open(config_path, 'r') as f:
        config = json.load(f)
    if not isinstance(config.get('terrain_jobs'), list):
        raise ValueError("Job file must contain a 'terrain_jobs' list")
    return config


def bake_terrains(jobs: list, output_dir: str, generator_settings: dict = None,
                  output_format: str = "npz", preview: bool = False, workers: int = 1,
                  logger: logging.Logger = None) -> dict:
    """
    Runs every job and writes manifest.json to `output_dir`.

    Returns:
        dict: The manifest, with one entry per successful terrain under
        'terrains' and one per rejected job under 'errors'.
    """
    logger = logger or logging.getLogger("Baker")
    generator_settings = generator_settings or {}
    os.makedirs(output_dir, exist_ok=True)
    start_time = time.time()

    # Settings are checked once here so a bad value fails before any worker starts.
    TerrainGenerator(config=generator_settings, logger=logger)

    init_args = (generator_settings, output_dir, output_format, preview)
    logger.info(f"Baking {len(jobs)} terrains to '{output_dir}' using {workers} worker(s)...")

    if workers > 1:
        with multiprocessing.Pool(processes=workers, initializer=init_worker, initargs=init_args) as pool:
            results = list(tqdm(pool.imap(process_job, jobs), total=len(jobs), desc="Baking Terrains"))
    else:
        init_worker(*init_args)
        results = [process_job(job) for job in tqdm(jobs, desc="Baking Terrains")]

    manifest = {'terrains': [], 'errors': []}
    for result in results:
        if 'error' in result:
            logger.error(f"Rejected terrain '{result['name']}': {result['error']}")
            manifest['errors'].append(result)
        else:
            manifest['terrains'].append(result)

    manifest_path = os.path.join(output_dir, "manifest.json")
    with open(manifest_path, 'w') as f:
        json.dump(manifest, f, indent=2)

    elapsed = time.time() - start_time
    logger.info(
        f"Baking complete! {len(manifest['terrains'])} saved, {len(manifest['errors'])} rejected "
        f"in {elapsed:.2f} seconds."
    )
    return manifest


def setup_logging(log_config_path: str = None, level: int = logging.INFO):
    """Configures logging from a dictConfig JSON file, or a simple console format."""
    if log_config_path:
        with open(log_config_path, 'rt') as f:
            logging.config.dictConfig(json.load(f))
    else:
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            stream=sys.stdout
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Offline baker for procedural terrain meshes.")
    parser.add_argument("--config", type=str, help="Path to a JSON job file.")
    parser.add_argument("--output", type=str, default=None, help="Output directory.")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="npz", help="Mesh file format.")
    parser.add_argument("--preview", action="store_true", help="Also write a PNG preview per terrain.")
    parser.add_argument("--workers", type=int, default=1, help="Number of worker processes.")
    parser.add_argument("--log-config", type=str, default=None, help="Path to a logging dictConfig JSON file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages.")

    single = parser.add_argument_group("single terrain (used when --config is omitted)")
    single.add_argument("--name", type=str, default="Terrain")
    single.add_argument("--width", type=float, default=DEFAULTS.WIDTH_RANGE[2])
    single.add_argument("--depth", type=float, default=DEFAULTS.DEPTH_RANGE[2])
    single.add_argument("--height-scale", type=float, default=DEFAULTS.HEIGHT_SCALE_RANGE[2])
    single.add_argument("--segments", type=int, default=DEFAULTS.SEGMENTS_RANGE[2])
    single.add_argument("--octaves", type=int, default=DEFAULTS.OCTAVES_RANGE[2])
    single.add_argument("--seed", type=int, default=None)
    single.add_argument("--biome", choices=DEFAULTS.BIOMES, default=DEFAULTS.DEFAULT_BIOME)
    return parser


def main(argv: list = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_config, logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger("Baker")

    generator_settings = {}
    output_dir = args.output
    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        try:
            config = load_jobs(args.config)
        except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
            logger.critical(f"Failed to load or parse config file: {e}")
            return 1
        jobs = config['terrain_jobs']
        generator_settings = config.get('generator_settings', {})
        output_dir = output_dir or config.get('output_dir', DEFAULT_OUTPUT_DIR)
    else:
        job = {
            'name': args.name,
            'width': args.width,
            'depth': args.depth,
            'heightScale': args.height_scale,
            'segments': args.segments,
            'octaves': args.octaves,
            'biome': args.biome,
        }
        if args.seed is not None:
            job['seed'] = args.seed
        jobs = [job]

    try:
        manifest = bake_terrains(
            jobs,
            output_dir or DEFAULT_OUTPUT_DIR,
            generator_settings=generator_settings,
            output_format=args.format,
            preview=args.preview,
            workers=max(1, args.workers),
            logger=logger,
        )
    except TerrainError as e:
        # Raised for invalid generator_settings, before any job runs.
        logger.critical(f"Invalid generator settings: {e}")
        return 1

    return 0 if not manifest['errors'] else 2
