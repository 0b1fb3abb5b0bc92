from __future__ import annotations

from src.abimanyu_core.abimanyu_core.core.enums import Collection
from src.abimanyu_core.abimanyu_core.quota.model import QuotaLedgerEntry


def test_consume_counts_up(container):
    svc = container.quota_service
    for n in range(1, 31):
        assert svc.try_consume("u1", False, "create_worker") is True
        status = svc.status("u1", False)
        assert status.used == n
        assert status.remaining == 100 - n


def test_fresh_user_starts_empty(container):
    status = container.quota_service.status("new", False)
    assert (status.used, status.max, status.remaining, status.percentage) == (0, 100, 100, 0.0)


def test_month_rollover_resets_usage(container, store):
    store.write(
        Collection.ACTION_LIMITS,
        [QuotaLedgerEntry(user_id="u1", actions_used=87, max_actions=100, reset_date="2026-09", is_premium=False).to_dict()],
    )

    status = container.quota_service.status("u1", False)

    assert status.used == 0
    assert status.remaining == 100
    assert store.read(Collection.ACTION_LIMITS)[0]["reset_date"] == "2026-10"


def test_rollover_when_clock_moves_to_next_month(container, clock):
    svc = container.quota_service
    for _ in range(5):
        svc.try_consume("u1", False, "x")

    clock.advance(days=20)

    assert svc.status("u1", False).used == 0


def test_free_cap_then_upgrade(container, store, notifier):
    svc = container.quota_service
    for _ in range(100):
        assert svc.try_consume("u1", False, "x")
    snapshot = store.read(Collection.ACTION_LIMITS)

    assert svc.try_consume("u1", False, "x") is False
    assert store.read(Collection.ACTION_LIMITS) == snapshot
    assert notifier.messages("warning")[-1] == (
        "Batas aksi bulanan tercapai (100). Upgrade ke Premium untuk lebih banyak aksi."
    )
    assert svc.can_perform("u1", False) is False

    assert svc.try_consume("u1", True, "x") is True
    status = svc.status("u1", True)
    assert (status.used, status.max, status.remaining) == (101, 500, 399)


def test_downgrade_clamps_remaining(container):
    svc = container.quota_service
    for _ in range(150):
        svc.try_consume("u1", True, "x")

    status = svc.status("u1", False)

    assert status.used == 150
    assert status.max == 100
    assert status.remaining == 0
    assert status.percentage == 100.0
    assert svc.try_consume("u1", False, "x") is False


def test_low_quota_warning(container, notifier):
    svc = container.quota_service
    for _ in range(89):
        svc.try_consume("u1", False, "x")
    assert not any(m.startswith("Sisa") for m in notifier.messages())

    svc.try_consume("u1", False, "x")

    assert notifier.messages("warning")[-1] == "Sisa 10 aksi bulan ini"


def test_users_are_tracked_separately(container):
    svc = container.quota_service
    svc.try_consume("a", False, "x")
    svc.try_consume("a", False, "x")
    svc.try_consume("b", False, "x")

    assert svc.status("a", False).used == 2
    assert svc.status("b", False).used == 1
