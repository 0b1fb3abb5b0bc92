from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock
from ..common.ids import new_id
from ..common.validators import require_min_length, require_non_negative, require_positive
from ..core.enums import NotificationLevel
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.notifier import Notifier
from .model import Material
from .store_repository import StoreMaterialRepository

logger = logging.getLogger(__name__)


class MaterialService:
    """Materials inventory."""

    def __init__(self, materials: StoreMaterialRepository, notifier: Notifier, *, clock: Optional[Clock] = None):
        self._materials = materials
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def create_material(
        self,
        *,
        name: str,
        unit: str,
        price_per_unit: int,
        stock: float = 0,
        min_stock: float = 0,
        supplier: str = "",
        category: str = "",
    ) -> Material:
        name = require_min_length(name, "Nama material", 2)
        require_positive(price_per_unit, "Harga material")
        require_non_negative(stock, "Stok")
        require_non_negative(min_stock, "Stok minimum")

        material = Material(
            material_id=new_id(),
            name=name,
            unit=(unit or "").strip(),
            price_per_unit=price_per_unit,
            supplier=(supplier or "").strip(),
            category=(category or "").strip(),
            stock=stock,
            min_stock=min_stock,
            last_updated=self._clock.now(),
        )
        self._materials.add(material)
        return material

    def adjust_stock(self, material_id: str, delta: float) -> Material:
        material = self._materials.get(str(material_id))
        if not material:
            raise NotFoundError("Material tidak ditemukan")

        new_stock = material.stock + delta
        if new_stock < 0:
            raise ValidationError(f"Stok {material.name} tidak mencukupi")

        updated = replace(material, stock=new_stock, last_updated=self._clock.now())
        self._materials.replace(updated)
        if updated.is_low_stock:
            self._notifier.notify(
                NotificationLevel.WARNING,
                f"Stok {material.name} menipis ({updated.stock} {material.unit})",
            )
        logger.info("material %s stock %s -> %s", material.material_id, material.stock, new_stock)
        return updated

    def list_materials(self, *, low_stock_only: bool = False) -> list[Material]:
        materials = list(self._materials.list_all())
        if low_stock_only:
            materials = [m for m in materials if m.is_low_stock]
        return materials
