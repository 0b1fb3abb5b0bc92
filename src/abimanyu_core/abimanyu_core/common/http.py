from __future__ import annotations

import logging
import math
from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    DomainError,
    NotFoundError,
    QuotaExceededError,
    StateError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (StateError, 409),
    (QuotaExceededError, 429),
)


def json_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Body harus berupa objek JSON")
    return body


def current_user_id() -> str:
    user_id = (request.headers.get("X-User-Id") or "").strip()
    return user_id or str(current_app.config.get("TENANT_ID", "default"))


def date_field(body: dict, key: str, label: str, *, required: bool = True) -> Optional[date]:
    raw = (body.get(key) or "").strip() if isinstance(body.get(key), str) else body.get(key)
    if not raw:
        if required:
            raise ValidationError(f"{label} wajib diisi")
        return None
    try:
        return parse_iso_date(str(raw))
    except ValueError:
        raise ValidationError(f"{label} tidak valid (YYYY-MM-DD)")


def number_field(body: dict, key: str, label: str, *, default: Any = None, integer: bool = False):
    raw = body.get(key, default)
    if raw is None or raw == "":
        if default is not None:
            return default
        raise ValidationError(f"{label} wajib diisi")
    if isinstance(raw, bool):
        raise ValidationError(f"{label} harus berupa angka")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} harus berupa angka")
    if not math.isfinite(value):
        raise ValidationError(f"{label} harus berupa angka")
    if integer:
        if value != int(value):
            raise ValidationError(f"{label} harus bilangan bulat")
        return int(value)
    return int(value) if value == int(value) else value


def quota_gated(container, action_type: str):
    """Gate a mutating endpoint on the monthly action quota.

    The action is charged only after the view returns; a request that fails
    validation or state checks costs nothing.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = current_user_id()
            is_premium = container.premium_service.is_premium(user_id)
            quota = container.quota_service
            if not quota.can_perform(user_id, is_premium):
                # try_consume on an exhausted ledger only sends the warning
                quota.try_consume(user_id, is_premium, action_type)
                raise QuotaExceededError(quota.exhausted_message(quota.status(user_id, is_premium).max, is_premium))
            response = view(*args, **kwargs)
            quota.try_consume(user_id, is_premium, action_type)
            return response

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls)), 400)
        if isinstance(e, StateError):
            logger.warning("state error on %s %s: %s", request.method, request.path, e)
        return jsonify({"error": str(e)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Terjadi kesalahan sistem"}), 500
