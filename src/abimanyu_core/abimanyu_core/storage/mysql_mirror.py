from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone


class MySQLMirror:
    """Remote mirror keeping one JSON snapshot per (tenant, collection)."""

    def __init__(self, conn_factory: DatabaseConnection, *, tenant_id: str):
        self._conn_factory = conn_factory
        self._tenant_id = str(tenant_id)

    def push(self, collection: str, records: Sequence[dict]) -> None:
        payload = json.dumps(list(records), ensure_ascii=False)
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO collection_snapshots(tenant_id, name, payload)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (self._tenant_id, str(collection), payload),
            )

    def pull(self, collection: str) -> Optional[list[dict]]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                "SELECT payload FROM collection_snapshots WHERE tenant_id=%s AND name=%s",
                (self._tenant_id, str(collection)),
            )
            row = fetchone(cur)
            if not row:
                return None
            return list(json.loads(row["payload"]))
