from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_user_id, date_field, json_body, number_field, quota_gated
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.overtime_service

    @app.route("/api/overtime", methods=["GET"], endpoint="list_overtime")
    def list_overtime():
        records = svc.list_records(
            worker_id=request.args.get("worker_id") or None,
            period=request.args.get("period") or None,
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/overtime", methods=["POST"], endpoint="create_overtime")
    @quota_gated(container, "create_overtime")
    def create_overtime():
        body = json_body()
        rate = body.get("rate")
        record = svc.record_overtime(
            worker_id=str(body.get("worker_id") or ""),
            work_date=date_field(body, "date", "Tanggal lembur"),
            hours=number_field(body, "hours", "Jam lembur"),
            rate=number_field(body, "rate", "Tarif lembur") if rate not in (None, "") else None,
            description=body.get("description", ""),
            project_id=body.get("project_id"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/overtime/<overtime_id>/approve", methods=["POST"], endpoint="approve_overtime")
    @quota_gated(container, "approve_overtime")
    def approve_overtime(overtime_id: str):
        return jsonify(svc.approve(overtime_id, approver=current_user_id()).to_dict())

    @app.route("/api/overtime/<overtime_id>/reject", methods=["POST"], endpoint="reject_overtime")
    @quota_gated(container, "reject_overtime")
    def reject_overtime(overtime_id: str):
        return jsonify(svc.reject(overtime_id).to_dict())
