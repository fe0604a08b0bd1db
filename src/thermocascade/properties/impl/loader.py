import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

import numpy as np

from thermocascade.common.exceptions import TableLoadError

# imported for the category registrations
from . import selection  # noqa: F401
from .registry import classify
from .table import ReferenceTable

log = logging.getLogger(__name__)

DEFAULT_TABLE_FILES = {
    "high": "dat_X_1_1.dat",
    "unit": "dat_X_1_00.dat",
    "low": "dat_X_00_1.dat",
}


def load_table(path: Union[str, Path]) -> ReferenceTable:
    """Parse a whitespace-separated ``coordinate value_a value_b`` file."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise TableLoadError(f"Failed to open file: {p}") from exc

    lines = [line for line in text.splitlines() if line.split("#", 1)[0].strip()]
    if not lines:
        raise TableLoadError(f"File is empty: {p}")
    try:
        rows = np.loadtxt(lines, dtype=float, ndmin=2)
    except ValueError as exc:
        raise TableLoadError(f"Malformed table file {p}: {exc}") from exc
    if rows.shape[1] != 3:
        raise TableLoadError(f"Expected 3 columns per row in {p}, found {rows.shape[1]}")

    table = ReferenceTable.from_rows(rows.tolist())
    log.info(f"Loaded {len(table)} samples from {p}")
    return table


@dataclass
class TableConfig:
    files: Dict[str, Path]

    def path_for(self, category: str) -> Path:
        path = self.files.get(category)
        if path is None:
            raise TableLoadError(f"No table configured for category '{category}'")
        return path

    def path_for_x(self, x: float) -> Path:
        category = classify(x)
        log.debug(f"x={x} selects table category '{category}'")
        return self.path_for(category)


def load_table_config(json_path: Union[str, Path]) -> TableConfig:
    p = Path(json_path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise TableLoadError(f"Failed to read table config {p}: {exc}") from exc
    # accepts {"tables": {...}} or a bare category mapping
    names = data.get("tables", data) if isinstance(data, dict) else None
    if not isinstance(names, dict):
        raise TableLoadError(f"Table config {p} must map categories to file names")
    return TableConfig(files={category: p.parent / name for category, name in names.items()})


def default_table_config(root: Union[str, Path]) -> TableConfig:
    root = Path(root)
    return TableConfig(files={category: root / name for category, name in DEFAULT_TABLE_FILES.items()})
