from pathlib import Path

from src.abimanyu_core.abimanyu_core.database.bootstrap import iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_schema_file_yields_only_table_statements():
    statements = list(iter_sql_statements(SCHEMA.read_text(encoding="utf-8")))

    assert len(statements) == 1
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS collection_snapshots")
    assert not statements[0].endswith(";")


def test_splitter_drops_comments_and_keeps_tail():
    sql = "-- note\nCREATE TABLE a (\n  id INT\n);\nuse other;\nSELECT 1"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (\n  id INT\n)", "SELECT 1"]
