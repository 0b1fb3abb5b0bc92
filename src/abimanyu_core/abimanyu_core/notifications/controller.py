from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", methods=["GET"], endpoint="list_notifications")
    def list_notifications():
        recent = getattr(container.notifier, "recent", None)
        if recent is None:
            return jsonify([])
        limit = request.args.get("limit", type=int) or 20
        return jsonify([n.to_dict() for n in recent(limit)])
