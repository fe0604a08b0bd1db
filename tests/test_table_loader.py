import json
from pathlib import Path

import pytest

from thermocascade.common.exceptions import TableLoadError
from thermocascade.properties import build_table_set, classify, load_table, load_table_config

DATA = Path(__file__).resolve().parents[1] / "data" / "tables"


def write_table(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_classify_categories():
    assert classify(1.5) == "high"
    assert classify(1.0) == "unit"
    assert classify(-1.0) == "unit"
    assert classify(0.3) == "low"
    assert classify(-2.0) == "low"
    assert classify(float("nan")) == "low"


def test_load_table_parses_triples(tmp_path):
    p = write_table(tmp_path / "t.dat", "0 0 0\n# comment\n1  10  5\n\n2\t20\t10\n")
    table = load_table(p)
    assert len(table) == 3
    assert table.ref_a(1.5) == 15.0
    assert table.ref_b(0.5) == 2.5


def test_load_single_row_table(tmp_path):
    p = write_table(tmp_path / "t.dat", "3.0 7.0 -2.0\n")
    table = load_table(p)
    assert len(table) == 1
    assert table.ref_a(100.0) == 7.0


def test_missing_file(tmp_path):
    with pytest.raises(TableLoadError, match="Failed to open file"):
        load_table(tmp_path / "nope.dat")


def test_empty_file(tmp_path):
    p = write_table(tmp_path / "empty.dat", "\n   \n# only a comment\n")
    with pytest.raises(TableLoadError, match="empty"):
        load_table(p)


def test_malformed_rows(tmp_path):
    p = write_table(tmp_path / "bad.dat", "0 0 0\n1 ten 5\n")
    with pytest.raises(TableLoadError):
        load_table(p)
    p = write_table(tmp_path / "short.dat", "0 0\n1 10\n")
    with pytest.raises(TableLoadError):
        load_table(p)


def test_config_resolves_relative_to_config_dir(tmp_path):
    write_table(tmp_path / "lo.dat", "0 0 0\n1 10 5\n")
    write_table(tmp_path / "hi.dat", "1 100 50\n5 500 250\n")
    cfg = tmp_path / "tables.json"
    cfg.write_text(json.dumps({"tables": {"low": "lo.dat", "high": "hi.dat"}}), encoding="utf-8")

    config = load_table_config(cfg)
    assert config.path_for("low") == tmp_path / "lo.dat"
    assert config.path_for_x(3.0) == tmp_path / "hi.dat"
    with pytest.raises(TableLoadError, match="unit"):
        config.path_for_x(1.0)


def test_bad_config(tmp_path):
    cfg = tmp_path / "tables.json"
    cfg.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(TableLoadError):
        load_table_config(cfg)
    with pytest.raises(TableLoadError):
        load_table_config(tmp_path / "missing.json")


def test_table_set_caches_and_selects(tmp_path):
    write_table(tmp_path / "dat_X_00_1.dat", "0 0 0\n1 10 5\n2 20 10\n")
    write_table(tmp_path / "dat_X_1_00.dat", "0 1 1\n")
    write_table(tmp_path / "dat_X_1_1.dat", "0 2 2\n")
    table_set = build_table_set(tables_dir=tmp_path)

    assert table_set.evaluate(0.0, 0.0, 0.0) == 0.0
    assert table_set.table("low") is table_set.table("low")
    assert table_set.table("unit").ref_a(0.0) == 1.0
    assert table_set.table("high").ref_b(9.0) == 2.0


def test_single_table_serves_every_category(tmp_path):
    p = write_table(tmp_path / "only.dat", "0 0 0\n1 10 5\n2 20 10\n")
    table_set = build_table_set(table_file=p)
    assert table_set.table("high") is table_set.table("low")
    assert abs(table_set.evaluate(0.5, 0.5, 0.5) - 23.365921) < 1e-6


def test_bundled_tables_load():
    table_set = build_table_set(config_json=DATA / "tables.json")
    for category in ("high", "unit", "low"):
        assert len(table_set.table(category)) >= 1
    assert isinstance(table_set.evaluate(0.2, 0.1, 0.3), float)
