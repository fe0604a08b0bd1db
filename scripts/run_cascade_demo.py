"""Evaluate the cascade at one point against the bundled reference tables."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from thermocascade.properties import FormulaCascade, build_table_set, classify


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default=ROOT / "data" / "tables" / "tables.json", type=Path, help="Table config JSON")
    parser.add_argument("x", type=float)
    parser.add_argument("y", type=float)
    parser.add_argument("z", type=float)
    return parser.parse_args()


def main():
    args = parse_args()
    table_set = build_table_set(config_json=args.config)
    category = classify(args.x)
    cascade = FormulaCascade(table_set.table(category))
    x, y, z = args.x, args.y, args.z
    print(f"table category: {category}")
    print(f"  delta_z  = {cascade.delta_z(x, y, z):.6g}")
    print(f"  r_factor2 = {cascade.r_factor2(x, y, z):.6g}")
    print(f"  r_factor3 = {cascade.r_factor3(x, y, z):.6g}")
    print(f"  fallback = {cascade.fallback(x, y, z):.6g}")
    print(f"fun({x:g}, {y:g}, {z:g}) = {cascade.evaluate(x, y, z):g}")


if __name__ == "__main__":
    main()
