from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_field, json_body, number_field, quota_gated
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.worker_service

    @app.route("/api/workers", methods=["GET"], endpoint="list_workers")
    def list_workers():
        active_only = request.args.get("active") in {"1", "true"}
        return jsonify([w.to_dict() for w in svc.list_workers(active_only=active_only)])

    @app.route("/api/workers", methods=["POST"], endpoint="create_worker")
    @quota_gated(container, "create_worker")
    def create_worker():
        body = json_body()
        worker = svc.create_worker(
            name=body.get("name", ""),
            daily_rate=number_field(body, "daily_rate", "Tarif harian", integer=True),
            position=body.get("position", ""),
            join_date=date_field(body, "join_date", "Tanggal bergabung"),
            phone=body.get("phone"),
            address=body.get("address"),
            skills=body.get("skills") or (),
        )
        return jsonify(worker.to_dict()), 201

    @app.route("/api/workers/<worker_id>", methods=["GET"], endpoint="get_worker")
    def get_worker(worker_id: str):
        return jsonify(svc.get(worker_id).to_dict())

    @app.route("/api/workers/<worker_id>/deactivate", methods=["POST"], endpoint="deactivate_worker")
    @quota_gated(container, "deactivate_worker")
    def deactivate_worker(worker_id: str):
        return jsonify(svc.deactivate(worker_id).to_dict())
