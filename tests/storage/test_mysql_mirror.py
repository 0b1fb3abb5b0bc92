from __future__ import annotations

from src.abimanyu_core.abimanyu_core.storage.mysql_mirror import MySQLMirror


class FakeCursor:
    def __init__(self, table: dict):
        self._table = table
        self._result = None

    def execute(self, sql, params=()):
        if sql.lstrip().upper().startswith("INSERT"):
            tenant, name, payload = params
            self._table[(tenant, name)] = payload
        else:
            payload = self._table.get(tuple(params))
            self._result = {"payload": payload} if payload is not None else None

    def fetchone(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict):
        self._table = table
        self.committed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self._table)

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self):
        self.table: dict = {}

    def connect(self, *, with_database: bool = True):
        return FakeConnection(self.table)


def test_push_then_pull_per_tenant():
    factory = FakeConnectionFactory()
    site_a = MySQLMirror(factory, tenant_id="site-a")
    site_b = MySQLMirror(factory, tenant_id="site-b")

    site_a.push("workers", [{"worker_id": "1", "name": "Ahmad"}])
    site_a.push("workers", [{"worker_id": "2", "name": "Bagus"}])

    assert site_a.pull("workers") == [{"worker_id": "2", "name": "Bagus"}]
    assert site_b.pull("workers") is None
