from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock
from ..core.constants import MONTHLY_PLAN_DAYS, YEARLY_PLAN_DAYS
from ..core.enums import NotificationLevel, SubscriptionPlan
from ..core.exceptions import ValidationError
from ..notifications.notifier import Notifier
from .model import Subscription
from .store_repository import StoreSubscriptionRepository

logger = logging.getLogger(__name__)

_PLAN_DAYS = {
    SubscriptionPlan.MONTHLY: MONTHLY_PLAN_DAYS,
    SubscriptionPlan.YEARLY: YEARLY_PLAN_DAYS,
}


class PremiumService:
    def __init__(self, subscriptions: StoreSubscriptionRepository, notifier: Notifier, *, clock: Optional[Clock] = None):
        self._subscriptions = subscriptions
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def activate(self, user_id: str, plan: SubscriptionPlan | str) -> Subscription:
        try:
            plan = SubscriptionPlan(plan)
        except ValueError:
            raise ValidationError("Paket langganan tidak dikenal")

        now = self._clock.now()
        current = self._subscriptions.get(str(user_id))
        # Renewing an active subscription extends it instead of restarting.
        start = current.premium_until if current and current.active_at(now) else now
        subscription = Subscription(
            user_id=str(user_id),
            plan=plan,
            premium_until=start + timedelta(days=_PLAN_DAYS[plan]),
        )
        self._subscriptions.save(subscription)
        logger.info("premium %s activated for %s until %s", plan.value, user_id, subscription.premium_until)
        self._notifier.notify(NotificationLevel.SUCCESS, "Langganan Premium aktif")
        return subscription

    def get(self, user_id: str) -> Optional[Subscription]:
        return self._subscriptions.get(str(user_id))

    def is_premium(self, user_id: str) -> bool:
        subscription = self._subscriptions.get(str(user_id))
        return bool(subscription and subscription.active_at(self._clock.now()))

    def check_expiry(self, user_id: str) -> bool:
        """Periodic tick. Returns the current premium state; safe to call repeatedly."""
        subscription = self._subscriptions.get(str(user_id))
        if not subscription:
            return False

        active = subscription.active_at(self._clock.now())
        if subscription.is_premium and not active:
            self._subscriptions.save(replace(subscription, is_premium=False))
            logger.info("premium expired for %s", user_id)
            self._notifier.notify(NotificationLevel.WARNING, "Langganan Premium Anda telah berakhir")
        elif active and not subscription.is_premium:
            self._subscriptions.save(replace(subscription, is_premium=True))
        return active
