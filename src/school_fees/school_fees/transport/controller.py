from __future__ import annotations

from flask import Flask

from ..common.http import error, json_body, not_found, ok, query_flag
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    routes = container.route_service

    @app.route("/api/transportation-routes", methods=["GET"], endpoint="list_routes")
    def list_routes():
        return ok(routes.list_routes(active_only=query_flag("active")))

    @app.route("/api/transportation-routes", methods=["POST"], endpoint="create_route")
    def create_route():
        try:
            return ok(routes.create_route(json_body()), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/transportation-routes/<int:route_id>", methods=["GET"], endpoint="get_route")
    def get_route(route_id: int):
        route = routes.get_route(route_id)
        return ok(route) if route else not_found("Route")

    @app.route("/api/transportation-routes/<int:route_id>", methods=["PATCH"], endpoint="update_route")
    def update_route(route_id: int):
        try:
            route = routes.update_route(route_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(route) if route else not_found("Route")

    @app.route("/api/transportation-routes/<int:route_id>", methods=["DELETE"], endpoint="delete_route")
    def delete_route(route_id: int):
        return ("", 204) if routes.delete_route(route_id) else not_found("Route")

    @app.route("/api/transportation-routes/<int:route_id>/students", methods=["GET"], endpoint="route_students")
    def route_students(route_id: int):
        return ok(container.student_service.list_by_route(route_id))
