from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from .connection import DBConfig, DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

# schema.sql names a database for manual use; the configured one wins here.
_DATABASE_LINE = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a schema file into statements.

    Statements end with ``;`` at the end of a line. Comment lines and
    database selection lines are dropped.
    """
    lines: list[str] = []
    for raw in sql.splitlines():
        line = raw.rstrip()
        if not line.strip() or line.lstrip().startswith("--"):
            continue
        lines.append(line)
        if line.endswith(";"):
            stmt = "\n".join(lines).rstrip(";").strip()
            lines.clear()
            if not _DATABASE_LINE.match(stmt):
                yield stmt

    tail = "\n".join(lines).strip()
    if tail and not _DATABASE_LINE.match(tail):
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    with db_cursor(conn_factory, dictionary=False, with_database=False) as cur:
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    ensure_database_exists(conn_factory)

    statements = list(iter_sql_statements(Path(schema_path).read_text(encoding="utf-8")))
    with db_cursor(conn_factory, dictionary=False) as cur:
        for stmt in statements:
            cur.execute(stmt)
    logger.info("applied %d schema statements to %s", len(statements), conn_factory.config.database)


def list_tables(db_config: dict) -> list[str]:
    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config))) as cur:
        cur.execute("SHOW TABLES")
        return [next(iter(row.values())) for row in fetchall(cur)]
