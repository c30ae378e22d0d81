"""Compile a level layout file and write its routes as JSON.

Developer utility for checking a hand-edited layout before shipping it:
prints a summary of every route and writes the compiled level to
output/<layout name>.json (or the path given with --output).

Usage:
    python scripts/compile_level.py levels/level1.txt
    python scripts/compile_level.py levels/level1.txt --output /tmp/level1.json
"""

import argparse
import logging
from pathlib import Path

from route_compiler.constants import OUTPUT_DIR, GridConfig
from route_compiler.generators.route_factory import RouteFactory

logging.basicConfig(level=logging.INFO)


def compile_level(layout_path: Path, output_path: Path, grid_size: int) -> None:
    """Compile one layout file, print its routes and save the JSON."""
    level = RouteFactory(grid_size=grid_size).compile_file(path=layout_path)

    print(f"Layout: {layout_path}")
    print(f"Goal: {level.goal}  Path tiles: {len(level.path)}  Forks: {len(level.forks)}")
    print(f"Entry points: {level.entry_count}")
    for projected in level.routes:
        print(f"  {projected.entry.coordinate} (spawn {projected.entry.spawn}): {len(projected.route)} tiles")
        print(f"    {projected.route}")

    saved = level.save_json(path=output_path)
    print(f"\nWritten: {saved}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compile a level layout into routes")
    parser.add_argument("layout", type=Path, help="Layout text file, one grid row per line")
    parser.add_argument("--output", type=Path, default=None, help="JSON output path")
    parser.add_argument("--size", type=int, default=GridConfig.SIZE, help="Grid edge length")
    args = parser.parse_args()

    compile_level(
        layout_path=args.layout,
        output_path=args.output or OUTPUT_DIR / f"{args.layout.stem}.json",
        grid_size=args.size,
    )
