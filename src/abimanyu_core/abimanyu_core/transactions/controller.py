from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, date_field, json_body, number_field, quota_gated
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.transaction_service

    @app.route("/api/transactions", methods=["GET"], endpoint="list_transactions")
    def list_transactions():
        return jsonify([t.to_dict() for t in svc.list_transactions()])

    @app.route("/api/transactions", methods=["POST"], endpoint="create_transaction")
    @quota_gated(container, "create_transaction")
    def create_transaction():
        body = json_body()
        tx = svc.create_transaction(
            type=body.get("type") or "",
            category=body.get("category", ""),
            amount=number_field(body, "amount", "Jumlah transaksi", integer=True),
            description=body.get("description", ""),
            tx_date=date_field(body, "date", "Tanggal transaksi"),
            created_by=current_user_id(),
            status=body.get("status") or "completed",
            project_id=body.get("project_id"),
        )
        return jsonify(tx.to_dict()), 201
