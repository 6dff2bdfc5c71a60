# bake_terrain.py

"""
================================================================================
OFFLINE TERRAIN BAKER SCRIPT
================================================================================
Command-line entry point for baking procedural terrains to disk. See
terrain_generator/baker.py for the job file layout.

Usage:
    python bake_terrain.py --config path/to/jobs.json
    python bake_terrain.py --name "Volcanic Island" --biome volcanic --seed 7 --preview
================================================================================
"""
import os
import sys

# Add project root to Python path to allow importing from terrain_generator
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from terrain_generator.baker import main

if __name__ == "__main__":
    sys.exit(main())
