from __future__ import annotations

from flask import Flask

from ..common.http import error, json_body, ok
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    settings = container.settings_service

    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    def get_settings():
        return ok(settings.get_settings())

    @app.route("/api/settings", methods=["PATCH"], endpoint="update_settings")
    def update_settings():
        try:
            return ok(settings.update_settings(json_body()))
        except ValidationError as e:
            return error(str(e))
