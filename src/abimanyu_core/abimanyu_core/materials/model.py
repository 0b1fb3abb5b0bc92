from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Material:
    material_id: str
    name: str
    unit: str
    price_per_unit: int
    supplier: str
    category: str
    stock: float
    min_stock: float
    last_updated: datetime

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock

    @property
    def stock_value(self):
        return self.stock * self.price_per_unit

    def to_dict(self) -> dict:
        return {
            "material_id": self.material_id,
            "name": self.name,
            "unit": self.unit,
            "price_per_unit": self.price_per_unit,
            "supplier": self.supplier,
            "category": self.category,
            "stock": self.stock,
            "min_stock": self.min_stock,
            "last_updated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Material":
        return cls(
            material_id=str(d["material_id"]),
            name=d["name"],
            unit=d.get("unit") or "",
            price_per_unit=d["price_per_unit"],
            supplier=d.get("supplier") or "",
            category=d.get("category") or "",
            stock=d.get("stock") or 0,
            min_stock=d.get("min_stock") or 0,
            last_updated=datetime.fromisoformat(d["last_updated"]),
        )
