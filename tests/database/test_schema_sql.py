import re
from pathlib import Path

from src.eduattend.eduattend.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def _tables() -> dict[str, str]:
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    tables = {}
    for stmt in _iter_sql_statements(sql):
        m = re.search(r"CREATE TABLE IF NOT EXISTS (\w+)", stmt)
        if m:
            tables[m.group(1)] = stmt
    return tables


def test_schema_defines_all_classroom_tables():
    assert set(_tables()) == {"classrooms", "classroom_students", "classroom_attendance", "classroom_notes"}


def test_classrooms_have_insertion_sequence():
    ddl = _tables()["classrooms"]
    assert re.search(r"seq BIGINT NOT NULL AUTO_INCREMENT", ddl)
    assert "UNIQUE KEY uq_classrooms_seq (seq)" in ddl


def test_ids_and_join_codes_compare_case_sensitively():
    tables = _tables()
    assert re.search(r"join_code VARCHAR\(64\) COLLATE utf8mb4_bin", tables["classrooms"])
    for name, ddl in tables.items():
        assert re.search(r"classroom_id VARCHAR\(64\) COLLATE utf8mb4_bin", ddl), name
