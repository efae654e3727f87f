"""
Build level packs for several glass heights.

Writes levels{height}.bin for every requested height, the packs the game
loads levels from.

Usage:
    python tools/build_levels.py
    python tools/build_levels.py --heights 3 4 5 --count 20 --out levels
"""

import argparse
import logging
import time

from pour_sort.levels import build_level_file


def main():
    parser = argparse.ArgumentParser(description="Generate pour sort level packs")
    parser.add_argument("--heights", type=int, nargs="+", default=[3, 4, 5])
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--out", default=".")
    parser.add_argument("--strategy", default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    for height in args.heights:
        start = time.perf_counter()
        path = build_level_file(height, args.count, args.out, args.strategy)
        print(f"{path}: {args.count} levels in {time.perf_counter() - start:.1f}s")


if __name__ == "__main__":
    main()
