from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_user_id, date_field, json_body, number_field, quota_gated
from ..container import Container
from ..core.enums import KasbonStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    svc = container.kasbon_service

    def _approver(body: dict) -> str:
        return (body.get("approver") or "").strip() or current_user_id()

    @app.route("/api/kasbon", methods=["GET"], endpoint="list_kasbon")
    def list_kasbon():
        status = request.args.get("status")
        try:
            status = KasbonStatus(status) if status else None
        except ValueError:
            raise ValidationError("Status kasbon tidak valid")
        records = svc.list_records(status=status, worker_id=request.args.get("worker_id") or None)
        return jsonify({"records": [r.to_dict() for r in records], "summary": svc.summary().to_dict()})

    @app.route("/api/kasbon", methods=["POST"], endpoint="submit_kasbon")
    @quota_gated(container, "submit_kasbon")
    def submit_kasbon():
        body = json_body()
        record = svc.submit(
            worker_id=str(body.get("worker_id") or ""),
            amount=number_field(body, "amount", "Jumlah kasbon"),
            reason=body.get("reason", ""),
            kasbon_date=date_field(body, "date", "Tanggal kasbon"),
            notes=body.get("notes"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/kasbon/<kasbon_id>/approve", methods=["POST"], endpoint="approve_kasbon")
    @quota_gated(container, "approve_kasbon")
    def approve_kasbon(kasbon_id: str):
        svc.approve(kasbon_id, approver=_approver(json_body()))
        deductions = svc.reconcile_deductions()
        return jsonify({"kasbon": svc.get(kasbon_id).to_dict(), "deductions": [d.to_dict() for d in deductions]})

    @app.route("/api/kasbon/<kasbon_id>/reject", methods=["POST"], endpoint="reject_kasbon")
    @quota_gated(container, "reject_kasbon")
    def reject_kasbon(kasbon_id: str):
        body = json_body()
        return jsonify(svc.reject(kasbon_id, approver=_approver(body), note=body.get("note")).to_dict())

    @app.route("/api/kasbon/<kasbon_id>/pay", methods=["POST"], endpoint="pay_kasbon")
    @quota_gated(container, "pay_kasbon")
    def pay_kasbon(kasbon_id: str):
        return jsonify(svc.mark_paid(kasbon_id).to_dict())

    @app.route("/api/kasbon/<kasbon_id>", methods=["DELETE"], endpoint="delete_kasbon")
    @quota_gated(container, "delete_kasbon")
    def delete_kasbon(kasbon_id: str):
        svc.delete(kasbon_id)
        return "", 204

    @app.route("/api/kasbon/reconcile", methods=["POST"], endpoint="reconcile_kasbon")
    def reconcile_kasbon():
        return jsonify([d.to_dict() for d in svc.reconcile_deductions()])
