"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Money is whole Rupiah.
"""

OVERTIME_MULTIPLIER = 1.5
HOURS_PER_DAY = 8
STANDARD_WEEK_HOURS = 40

MIN_DAILY_RATE = 1_000
MAX_DAILY_RATE = 1_000_000
MAX_DAYS_WORKED = 31
MAX_OVERTIME_HOURS = 12

KASBON_MIN_AMOUNT = 10_000

FREE_ACTION_LIMIT = 100
PREMIUM_ACTION_LIMIT = 500
LOW_QUOTA_THRESHOLD = 10

MONTHLY_PLAN_DAYS = 30
YEARLY_PLAN_DAYS = 365

LARGE_TRANSACTION_AMOUNT = 5_000_000

NOTIFICATION_FEED_SIZE = 100
MIRROR_MAX_ATTEMPTS = 2
