"""Plot the interpolated reference functions of a table file."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT / "src"))

from thermocascade.properties import load_table  # type: ignore


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("table", type=Path, help="Whitespace-separated coordinate/value_a/value_b file")
    parser.add_argument("--out", type=Path, default=Path("reference_table.png"))
    parser.add_argument("--points", type=int, default=200, help="Number of interpolation points")
    args = parser.parse_args()

    table = load_table(args.table)
    coords = np.array([s.coordinate for s in table.samples])
    q = np.linspace(coords.min(), coords.max(), args.points)

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(q, [table.ref_a(v) for v in q], label="ref_a")
    ax.plot(q, [table.ref_b(v) for v in q], label="ref_b")
    ax.plot(coords, [s.value_a for s in table.samples], "o", color="C0")
    ax.plot(coords, [s.value_b for s in table.samples], "o", color="C1")
    ax.set_xlabel("coordinate")
    ax.set_title(args.table.name)
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    args.out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(args.out, dpi=150)
    print(f"Saved plot to: {args.out}")


if __name__ == "__main__":
    main()
