from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .common.datetime_utils import Clock, SystemClock
from .database.connection import DBConfig, DatabaseConnection
from .kasbon.service import KasbonService
from .kasbon.store_repository import StoreKasbonRepository
from .materials.service import MaterialService
from .materials.store_repository import StoreMaterialRepository
from .notifications.notifier import LoggingNotifier, Notifier
from .overtime.service import OvertimeService
from .overtime.store_repository import StoreOvertimeRepository
from .payroll.service import PayrollService
from .payroll.store_repository import StorePayrollRepository
from .premium.service import PremiumService
from .premium.store_repository import StoreSubscriptionRepository
from .projects.service import ProjectService
from .projects.store_repository import StoreProjectRepository
from .quota.service import QuotaService
from .quota.store_repository import StoreQuotaRepository
from .reports.service import ReportService
from .storage.mirror import MirroredStore
from .storage.mysql_mirror import MySQLMirror
from .storage.store import InMemoryStore, JsonFileStore, KeyValueStore
from .transactions.service import TransactionService
from .transactions.store_repository import StoreTransactionRepository
from .workers.service import WorkerService
from .workers.store_repository import StoreWorkerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    clock: Clock
    notifier: Notifier

    worker_service: WorkerService
    overtime_service: OvertimeService
    payroll_service: PayrollService
    kasbon_service: KasbonService
    quota_service: QuotaService
    premium_service: PremiumService
    transaction_service: TransactionService
    project_service: ProjectService
    material_service: MaterialService
    report_service: ReportService


def build_store(
    *,
    storage_path: str = "",
    mirror_enabled: bool = False,
    db_config: Optional[dict] = None,
    tenant_id: str = "default",
    notifier: Optional[Notifier] = None,
) -> KeyValueStore:
    local: KeyValueStore = JsonFileStore(storage_path) if storage_path else InMemoryStore()
    if not mirror_enabled:
        return local

    mirror = MySQLMirror(DatabaseConnection(DBConfig.from_dict(db_config or {})), tenant_id=tenant_id)
    store = MirroredStore(local, mirror, notifier=notifier)
    if not storage_path:
        store.hydrate()
    logger.info("remote mirror enabled for tenant %s", tenant_id)
    return store


def build_container(
    *,
    store: KeyValueStore,
    clock: Optional[Clock] = None,
    notifier: Optional[Notifier] = None,
) -> Container:
    clock = clock or SystemClock()
    notifier = notifier or LoggingNotifier(clock=clock)

    workers_repo = StoreWorkerRepository(store)
    payroll_repo = StorePayrollRepository(store)
    overtime_repo = StoreOvertimeRepository(store)
    kasbon_repo = StoreKasbonRepository(store)
    transactions_repo = StoreTransactionRepository(store)
    projects_repo = StoreProjectRepository(store)
    materials_repo = StoreMaterialRepository(store)

    overtime_service = OvertimeService(overtime_repo, workers_repo)

    return Container(
        store=store,
        clock=clock,
        notifier=notifier,
        worker_service=WorkerService(workers_repo),
        overtime_service=overtime_service,
        payroll_service=PayrollService(payroll_repo, workers_repo, overtime_service, kasbon_repo, clock=clock),
        kasbon_service=KasbonService(kasbon_repo, workers_repo, payroll_repo, notifier, clock=clock),
        quota_service=QuotaService(StoreQuotaRepository(store), notifier, clock=clock),
        premium_service=PremiumService(StoreSubscriptionRepository(store), notifier, clock=clock),
        transaction_service=TransactionService(transactions_repo, notifier),
        project_service=ProjectService(projects_repo),
        material_service=MaterialService(materials_repo, notifier, clock=clock),
        report_service=ReportService(
            workers=workers_repo,
            payroll=payroll_repo,
            overtime=overtime_repo,
            kasbon=kasbon_repo,
            transactions=transactions_repo,
            projects=projects_repo,
            materials=materials_repo,
            clock=clock,
        ),
    )
