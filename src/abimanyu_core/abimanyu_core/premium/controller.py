from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.premium_service

    @app.route("/api/premium", methods=["GET"], endpoint="premium_status")
    def premium_status():
        user_id = current_user_id()
        subscription = svc.get(user_id)
        return jsonify(
            {
                "is_premium": svc.check_expiry(user_id),
                "subscription": subscription.to_dict() if subscription else None,
            }
        )

    @app.route("/api/premium", methods=["POST"], endpoint="activate_premium")
    def activate_premium():
        body = json_body()
        subscription = svc.activate(current_user_id(), body.get("plan") or "")
        return jsonify(subscription.to_dict()), 201

    @app.route("/api/premium/check", methods=["POST"], endpoint="check_premium_expiry")
    def check_premium_expiry():
        return jsonify({"is_premium": svc.check_expiry(current_user_id())})
