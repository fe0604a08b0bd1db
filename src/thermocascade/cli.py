"""Command-line front end: evaluate the cascade for one x, y, z request or a CSV batch."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from thermocascade.common.exceptions import DegenerateTableError, InvalidInputError, TableLoadError
from thermocascade.properties import TableSet, build_table_set, classify

log = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[2]
CONFIG_ENV = "THERMOCASCADE_CONFIG"
# options whose next token is their value, never a coordinate
_VALUE_OPTIONS = ("--config", "--table", "--batch", "--out")


def default_config() -> Path:
    """$THERMOCASCADE_CONFIG, else ./data/tables/tables.json, else the checkout's bundled config."""
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    local = Path("data/tables/tables.json")
    if local.exists():
        return local
    return ROOT / "data" / "tables" / "tables.json"


def _split_numeric(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    # argparse reads "-1e-3" as an unknown option, so numbers are pulled out first
    numeric: List[str] = []
    rest: List[str] = []
    tokens = iter(argv)
    for tok in tokens:
        if tok in _VALUE_OPTIONS:
            rest.append(tok)
            value = next(tokens, None)
            if value is not None:
                rest.append(value)
            continue
        try:
            float(tok)
        except ValueError:
            rest.append(tok)
        else:
            numeric.append(tok)
    return numeric, rest


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    argv = sys.argv[1:] if argv is None else list(argv)
    numeric, rest = _split_numeric(argv)

    parser = argparse.ArgumentParser(prog="thermocascade", description=__doc__, allow_abbrev=False)
    parser.add_argument("coords", nargs="*", help="x y z; prompted for when omitted")
    parser.add_argument("--config", type=Path, help=f"JSON file mapping table categories to files (default: ${CONFIG_ENV} or data/tables/tables.json)")
    parser.add_argument("--table", type=Path, help="Use this table for every request instead of selecting on x")
    parser.add_argument("--batch", type=Path, help="CSV with x, y, z columns to evaluate row by row")
    parser.add_argument("--out", type=Path, help="Where to write the batch results CSV (default: print)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")
    args = parser.parse_args(rest)
    # non-numeric leftovers stay in so parse_coords reports them
    args.coords = numeric + args.coords
    if args.config is None:
        args.config = default_config()
    return args


def parse_coords(tokens: Sequence[str]) -> Tuple[float, float, float]:
    if len(tokens) != 3:
        raise InvalidInputError(f"expected x, y, z but got {len(tokens)} value(s)")
    try:
        x, y, z = (float(tok) for tok in tokens)
    except ValueError as exc:
        raise InvalidInputError("x, y, z must be numeric values.") from exc
    return x, y, z


def _prompt_coords() -> List[str]:
    sys.stdout.write("Enter x, y, z: ")
    sys.stdout.flush()
    tokens: List[str] = []
    # values may span several lines
    for line in sys.stdin:
        tokens.extend(line.replace(",", " ").split())
        if len(tokens) >= 3:
            return tokens[:3]
    return tokens


def evaluate_batch(table_set: TableSet, requests: pd.DataFrame, select: bool = True) -> pd.DataFrame:
    """Evaluate every x, y, z row; ``select=False`` drops the category column when one table is forced."""
    missing = [col for col in ("x", "y", "z") if col not in requests.columns]
    if missing:
        raise InvalidInputError(f"batch input is missing column(s): {', '.join(missing)}")
    try:
        coords = requests[["x", "y", "z"]].astype(float)
    except ValueError as exc:
        raise InvalidInputError(f"batch columns x, y, z must be numeric: {exc}") from exc

    out = requests.copy()
    if select:
        out["category"] = [classify(x) for x in coords["x"]]
    out["result"] = [table_set.evaluate(x, y, z) for x, y, z in coords.itertuples(index=False, name=None)]
    log.info(f"Evaluated {len(out)} batch request(s)")
    return out


def _run(args: argparse.Namespace) -> None:
    table_set = build_table_set(config_json=args.config, table_file=args.table)

    if args.batch is not None:
        try:
            requests = pd.read_csv(args.batch)
        except OSError as exc:
            raise TableLoadError(f"Failed to open file: {args.batch}") from exc
        except pd.errors.EmptyDataError as exc:
            raise TableLoadError(f"File is empty: {args.batch}") from exc
        results = evaluate_batch(table_set, requests, select=args.table is None)
        if args.out is None:
            print(results.to_string(index=False))
        else:
            args.out.parent.mkdir(parents=True, exist_ok=True)
            results.to_csv(args.out, index=False)
            print(f"Saved {len(results)} result(s) to: {args.out}")
        return

    x, y, z = parse_coords(args.coords or _prompt_coords())
    result = table_set.evaluate(x, y, z)
    print(f"fun({x:g}, {y:g}, {z:g}) = {result:g}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else logging.INFO if args.verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        _run(args)
    except TableLoadError as e:
        print(f"[File Error] {e}", file=sys.stderr)
        return 1
    except InvalidInputError as e:
        print(f"[Input Error] {e}", file=sys.stderr)
        return 1
    except DegenerateTableError as e:
        print(f"[Degenerate Table] {e}", file=sys.stderr)
        return 1
    except Exception as e:
        log.debug("unexpected failure", exc_info=True)
        print(f"[Unexpected Error] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
