#!/usr/bin/env python3
"""Maze structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727
  python scripts/diagnose_seeds.py --algorithm recursive_division --rows 20 --columns 30 17

If no seeds are provided, a default list is used. Exits non-zero when a
generated level is not a connected tree with symmetric links.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from labyrinth.maze import Level, MazeConfig, load_env_file  # noqa: E402 import after path fix
from labyrinth.maze.debug_checks import analyze  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]


def run_for_seed(seed: int, cfg: MazeConfig) -> dict:
    level = Level.from_config(MazeConfig(
        rows=cfg.rows,
        columns=cfg.columns,
        algorithm=cfg.algorithm,
        seed=seed,
        enable_metrics=True,
        room_chance=cfg.room_chance,
    ))
    res = analyze(level.grid)
    issues = {
        "unreachable": len(res["unreachable"]),
        "asymmetric_links": len(res["asymmetric_links"]),
        "non_adjacent_links": len(res["non_adjacent_links"]),
        "cycles": max(0, res["edges"] - (level.grid.size - 1)),
    }
    return {
        "seed": seed,
        "algorithm": level.algorithm_name,
        "entrance": level.entrance_pos,
        "stairs": level.stairs_pos,
        "longest_path_length": level.metrics["longest_path_length"],
        "dead_ends": res["dead_ends"],
        "issues": issues,
        "ok": all(v == 0 for v in issues.values()),
    }


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check generated mazes for structural issues.")
    parser.add_argument("seeds", nargs="*", type=int)
    parser.add_argument("--env-file", help="load MAZE_* overrides from a .env file")
    parser.add_argument("--algorithm")
    parser.add_argument("--rows", type=int)
    parser.add_argument("--columns", type=int)
    return parser.parse_args(argv)


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    if args.env_file:
        load_env_file(args.env_file)
    cfg = MazeConfig().resolve()
    if args.algorithm:
        cfg.algorithm = args.algorithm
    if args.rows:
        cfg.rows = args.rows
    if args.columns:
        cfg.columns = args.columns
    seeds = args.seeds or DEFAULT_SEEDS
    results = [run_for_seed(s, cfg) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
