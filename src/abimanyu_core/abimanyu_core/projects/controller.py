from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import date_field, json_body, number_field, quota_gated
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.project_service

    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    def list_projects():
        return jsonify([p.to_dict() for p in svc.list_projects()])

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    @quota_gated(container, "create_project")
    def create_project():
        body = json_body()
        project = svc.create_project(
            name=body.get("name", ""),
            budget=number_field(body, "budget", "Budget proyek", integer=True),
            start_date=date_field(body, "start_date", "Tanggal mulai"),
            end_date=date_field(body, "end_date", "Tanggal selesai", required=False),
            description=body.get("description", ""),
            location=body.get("location", ""),
            status=body.get("status") or "planning",
            spent=number_field(body, "spent", "Biaya terpakai", default=0, integer=True),
            manager=body.get("manager", ""),
            progress=number_field(body, "progress", "Progres", default=0, integer=True),
            workers=body.get("workers") or (),
        )
        return jsonify(project.to_dict()), 201
