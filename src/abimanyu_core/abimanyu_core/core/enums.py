from __future__ import annotations

from enum import Enum


class Collection(str, Enum):
    """Named collections kept in the persistence store."""

    WORKERS = "workers"
    TRANSACTIONS = "transactions"
    PAYROLL = "payrollRecords"
    OVERTIME = "overtimeRecords"
    KASBON = "kasbonRecords"
    MATERIALS = "materials"
    PROJECTS = "projects"
    ACTION_LIMITS = "actionLimits"
    SUBSCRIPTIONS = "subscriptions"


class PayrollStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


class KasbonStatus(str, Enum):
    """Salary advance lifecycle: pending -> approved -> deducted | paid, or pending -> rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    PAID = "paid"
    DEDUCTED = "deducted"
    REJECTED = "rejected"


class OvertimeStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class SubscriptionPlan(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
