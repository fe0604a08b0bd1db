"""Table-set interfaces that bridge file-based reference tables with the formula cascade."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from .impl.cascade import FormulaCascade
from .impl.loader import (
    DEFAULT_TABLE_FILES,
    TableConfig,
    default_table_config,
    load_table,
    load_table_config,
)
from .impl.registry import classify
from .impl.table import ReferenceTable


@dataclass
class TableSet:
    """Category-keyed tables, each loaded on first use and reused afterwards."""

    config: TableConfig
    _cache: Dict[Path, ReferenceTable] = field(default_factory=dict, init=False, repr=False)

    def table(self, category: str) -> ReferenceTable:
        path = self.config.path_for(category)
        table = self._cache.get(path)
        if table is None:
            table = load_table(path)
            self._cache[path] = table
        return table

    def evaluate(self, x: float, y: float, z: float) -> float:
        return FormulaCascade(self.table(classify(x))).evaluate(x, y, z)


def _coerce_path(path: Union[str, Path]) -> Path:
    return path if isinstance(path, Path) else Path(path)


def build_table_set(
    config_json: Optional[Union[str, Path]] = None,
    tables_dir: Optional[Union[str, Path]] = None,
    table_file: Optional[Union[str, Path]] = None,
) -> TableSet:
    """Build a table set from the first of ``table_file``, ``config_json`` or ``tables_dir`` given.

    ``table_file`` serves every category from one table, bypassing selection on x.
    """
    if table_file is not None:
        path = _coerce_path(table_file)
        return TableSet(config=TableConfig(files={category: path for category in DEFAULT_TABLE_FILES}))
    if config_json is not None:
        return TableSet(config=load_table_config(_coerce_path(config_json)))
    if tables_dir is None:
        raise ValueError("Provide either config_json or tables_dir")
    return TableSet(config=default_table_config(_coerce_path(tables_dir)))
