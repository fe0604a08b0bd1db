"""Convenience exports for reference-table property evaluation."""

from .impl.cascade import FormulaCascade, evaluate
from .impl.loader import TableConfig, load_table, load_table_config
from .impl.registry import classify
from .impl.table import ReferenceTable, Sample
from .interfaces import TableSet, build_table_set

__all__ = [
    "FormulaCascade",
    "ReferenceTable",
    "Sample",
    "TableConfig",
    "TableSet",
    "build_table_set",
    "classify",
    "evaluate",
    "load_table",
    "load_table_config",
]
