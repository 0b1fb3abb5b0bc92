from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock, year_month
from ..core.constants import FREE_ACTION_LIMIT, LOW_QUOTA_THRESHOLD, PREMIUM_ACTION_LIMIT
from ..core.enums import NotificationLevel
from ..notifications.notifier import Notifier
from .model import QuotaLedgerEntry, QuotaStatus
from .repository import QuotaRepository

logger = logging.getLogger(__name__)


def cap_for(is_premium: bool) -> int:
    return PREMIUM_ACTION_LIMIT if is_premium else FREE_ACTION_LIMIT


class QuotaService:
    """Monthly action quota per user.

    Reading the ledger performs the month rollover and applies tier changes,
    and persists both, so every public method sees an up-to-date entry.
    """

    def __init__(self, ledger: QuotaRepository, notifier: Notifier, *, clock: Optional[Clock] = None):
        self._ledger = ledger
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def _entry(self, user_id: str, is_premium: bool) -> QuotaLedgerEntry:
        user_id = str(user_id)
        current_month = year_month(self._clock.now())
        entry = self._ledger.get(user_id)

        if entry is None or entry.reset_date != current_month:
            if entry is not None:
                logger.info("quota rollover for %s: %s -> %s", user_id, entry.reset_date, current_month)
            entry = QuotaLedgerEntry(
                user_id=user_id,
                actions_used=0,
                max_actions=cap_for(is_premium),
                reset_date=current_month,
                is_premium=bool(is_premium),
            )
            self._ledger.save(entry)
            return entry

        if entry.is_premium != bool(is_premium):
            # Tier change keeps what was used; only the cap moves.
            entry = replace(entry, is_premium=bool(is_premium), max_actions=cap_for(is_premium))
            self._ledger.save(entry)
            logger.info("quota tier change for %s: max=%d used=%d", user_id, entry.max_actions, entry.actions_used)

        return entry

    @staticmethod
    def _status(entry: QuotaLedgerEntry) -> QuotaStatus:
        remaining = max(0, entry.max_actions - entry.actions_used)
        percentage = min(100.0, entry.actions_used / entry.max_actions * 100) if entry.max_actions else 100.0
        return QuotaStatus(
            used=entry.actions_used,
            max=entry.max_actions,
            remaining=remaining,
            percentage=percentage,
        )

    def status(self, user_id: str, is_premium: bool) -> QuotaStatus:
        return self._status(self._entry(user_id, is_premium))

    def can_perform(self, user_id: str, is_premium: bool) -> bool:
        entry = self._entry(user_id, is_premium)
        return entry.actions_used < entry.max_actions

    @staticmethod
    def exhausted_message(max_actions: int, is_premium: bool) -> str:
        upgrade = "Upgrade ke Loyal untuk unlimited." if is_premium else "Upgrade ke Premium untuk lebih banyak aksi."
        return f"Batas aksi bulanan tercapai ({max_actions}). {upgrade}"

    def try_consume(self, user_id: str, is_premium: bool, action_type: str) -> bool:
        entry = self._entry(user_id, is_premium)

        if entry.actions_used >= entry.max_actions:
            self._notifier.notify(NotificationLevel.WARNING, self.exhausted_message(entry.max_actions, is_premium))
            logger.info("quota exhausted for %s (%s)", entry.user_id, action_type)
            return False

        entry = replace(entry, actions_used=entry.actions_used + 1)
        self._ledger.save(entry)

        remaining = max(0, entry.max_actions - entry.actions_used)
        if remaining <= LOW_QUOTA_THRESHOLD:
            self._notifier.notify(NotificationLevel.WARNING, f"Sisa {remaining} aksi bulan ini")
        logger.debug("quota %s consumed by %s (%d/%d)", action_type, entry.user_id, entry.actions_used, entry.max_actions)
        return True
