from __future__ import annotations

from typing import Any

from flask import jsonify, request

from ..core.exceptions import ValidationError
from .serialization import to_jsonable


def ok(data: Any, status: int = 200):
    return jsonify(to_jsonable(data)), status


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def not_found(what: str):
    return error(f"{what} not found", 404)


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def query_flag(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() in {"1", "true", "yes"}
