from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/quota", methods=["GET"], endpoint="quota_status")
    def quota_status():
        user_id = current_user_id()
        is_premium = container.premium_service.is_premium(user_id)
        status = container.quota_service.status(user_id, is_premium)
        return jsonify({**status.to_dict(), "is_premium": is_premium})
