from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, number_field, quota_gated
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.material_service

    @app.route("/api/materials", methods=["GET"], endpoint="list_materials")
    def list_materials():
        low_only = request.args.get("low_stock") in {"1", "true"}
        return jsonify([m.to_dict() for m in svc.list_materials(low_stock_only=low_only)])

    @app.route("/api/materials", methods=["POST"], endpoint="create_material")
    @quota_gated(container, "create_material")
    def create_material():
        body = json_body()
        material = svc.create_material(
            name=body.get("name", ""),
            unit=body.get("unit", ""),
            price_per_unit=number_field(body, "price_per_unit", "Harga material", integer=True),
            stock=number_field(body, "stock", "Stok", default=0),
            min_stock=number_field(body, "min_stock", "Stok minimum", default=0),
            supplier=body.get("supplier", ""),
            category=body.get("category", ""),
        )
        return jsonify(material.to_dict()), 201

    @app.route("/api/materials/<material_id>/stock", methods=["POST"], endpoint="adjust_material_stock")
    @quota_gated(container, "adjust_stock")
    def adjust_material_stock(material_id: str):
        body = json_body()
        return jsonify(svc.adjust_stock(material_id, number_field(body, "delta", "Perubahan stok")).to_dict())
