from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, number_field, quota_gated
from ..container import Container
from ..core.enums import PayrollStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    @app.route("/api/payroll/compute", methods=["POST"], endpoint="compute_payroll")
    def compute_payroll():
        body = json_body()
        breakdown = svc.compute_payroll(
            number_field(body, "daily_rate", "Tarif harian", integer=True),
            number_field(body, "days_worked", "Hari kerja", integer=True),
            number_field(body, "overtime_total", "Total lembur", default=0),
        )
        return jsonify(breakdown.to_dict())

    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    def list_payroll():
        status = request.args.get("status")
        try:
            status = PayrollStatus(status) if status else None
        except ValueError:
            raise ValidationError("Status gaji tidak valid")
        records = svc.list_records(status=status, period=request.args.get("period") or None)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/payroll", methods=["POST"], endpoint="create_payroll")
    @quota_gated(container, "create_payroll")
    def create_payroll():
        body = json_body()
        record = svc.create_payroll(
            worker_id=str(body.get("worker_id") or ""),
            period=str(body.get("period") or ""),
            days_worked=number_field(body, "days_worked", "Hari kerja", integer=True),
            notes=body.get("notes"),
        )
        deductions = container.kasbon_service.reconcile_deductions()
        return jsonify({"payroll": record.to_dict(), "deductions": [d.to_dict() for d in deductions]}), 201

    @app.route("/api/payroll/<payroll_id>/pay", methods=["POST"], endpoint="pay_payroll")
    @quota_gated(container, "pay_payroll")
    def pay_payroll(payroll_id: str):
        return jsonify(svc.mark_paid(payroll_id).to_dict())

    @app.route("/api/payroll/<payroll_id>/cancel", methods=["POST"], endpoint="cancel_payroll")
    @quota_gated(container, "cancel_payroll")
    def cancel_payroll(payroll_id: str):
        return jsonify(svc.cancel(payroll_id).to_dict())

    @app.route("/api/payroll/<payroll_id>/settlement", methods=["GET"], endpoint="payroll_settlement")
    def payroll_settlement(payroll_id: str):
        return jsonify(svc.settlement(payroll_id).to_dict())
