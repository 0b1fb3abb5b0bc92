from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.formatting import format_rupiah
from ..common.ids import new_id
from ..common.validators import require_date, require_min_length, require_non_empty, require_positive
from ..core.constants import LARGE_TRANSACTION_AMOUNT
from ..core.enums import NotificationLevel, TransactionStatus, TransactionType
from ..core.exceptions import ValidationError
from ..notifications.notifier import Notifier
from .model import Transaction
from .store_repository import StoreTransactionRepository

logger = logging.getLogger(__name__)


class TransactionService:
    """Cash flow entries (income/expense)."""

    def __init__(self, transactions: StoreTransactionRepository, notifier: Notifier):
        self._transactions = transactions
        self._notifier = notifier

    def create_transaction(
        self,
        *,
        type: TransactionType | str,
        category: str,
        amount: int,
        description: str,
        tx_date: Optional[date],
        created_by: str,
        status: TransactionStatus | str = TransactionStatus.COMPLETED,
        project_id: Optional[str] = None,
    ) -> Transaction:
        try:
            tx_type = TransactionType(type)
            tx_status = TransactionStatus(status)
        except ValueError:
            raise ValidationError("Jenis atau status transaksi tidak valid")

        require_positive(amount, "Jumlah transaksi")
        description = require_min_length(description, "Deskripsi", 5)
        category = require_non_empty(category, "Kategori")
        tx_date = require_date(tx_date, "Tanggal transaksi")

        tx = Transaction(
            transaction_id=new_id(),
            type=tx_type,
            category=category,
            amount=amount,
            description=description,
            date=tx_date,
            status=tx_status,
            created_by=created_by,
            project_id=project_id or None,
        )
        self._transactions.add(tx)
        logger.info("transaction %s %s %s", tx.transaction_id, tx.type.value, tx.amount)

        if amount > LARGE_TRANSACTION_AMOUNT:
            label = "Pemasukan" if tx_type == TransactionType.INCOME else "Pengeluaran"
            self._notifier.notify(NotificationLevel.WARNING, f"{label} besar tercatat: {format_rupiah(amount)}")
        return tx

    def list_transactions(self) -> list[Transaction]:
        return list(self._transactions.list_all())
