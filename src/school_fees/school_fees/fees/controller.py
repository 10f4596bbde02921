from __future__ import annotations

from flask import Flask, request

from ..common.http import error, json_body, not_found, ok
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    structure = container.fee_structure_service
    dues = container.fee_due_service

    @app.route("/api/fee-structure", methods=["GET"], endpoint="list_fee_structure")
    def list_fee_structure():
        grade = request.args.get("grade", "")
        return ok(structure.list_by_grade(grade) if grade else structure.list_all())

    @app.route("/api/fee-structure", methods=["POST"], endpoint="create_fee_structure")
    def create_fee_structure():
        try:
            return ok(structure.create_item(json_body()), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/fee-structure/<int:fee_id>", methods=["GET"], endpoint="get_fee_structure")
    def get_fee_structure(fee_id: int):
        item = structure.get_item(fee_id)
        return ok(item) if item else not_found("Fee structure item")

    @app.route("/api/fee-structure/<int:fee_id>", methods=["PATCH"], endpoint="update_fee_structure")
    def update_fee_structure(fee_id: int):
        try:
            item = structure.update_item(fee_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(item) if item else not_found("Fee structure item")

    @app.route("/api/fee-structure/<int:fee_id>", methods=["DELETE"], endpoint="delete_fee_structure")
    def delete_fee_structure(fee_id: int):
        return ("", 204) if structure.delete_item(fee_id) else not_found("Fee structure item")

    @app.route("/api/students/<int:student_id>/fee-dues", methods=["GET"], endpoint="student_fee_dues")
    def student_fee_dues(student_id: int):
        return ok(
            {
                "dues": dues.list_by_student(student_id),
                "outstanding": dues.outstanding_balance(student_id),
            }
        )

    @app.route("/api/fee-dues", methods=["POST"], endpoint="create_fee_due")
    def create_fee_due():
        try:
            return ok(dues.create_due(json_body()), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/fee-dues/<int:due_id>", methods=["GET"], endpoint="get_fee_due")
    def get_fee_due(due_id: int):
        due = dues.get_due(due_id)
        return ok(due) if due else not_found("Fee due")

    @app.route("/api/fee-dues/<int:due_id>", methods=["PATCH"], endpoint="update_fee_due")
    def update_fee_due(due_id: int):
        try:
            due = dues.update_due(due_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(due) if due else not_found("Fee due")

    @app.route("/api/fee-dues/<int:due_id>", methods=["DELETE"], endpoint="delete_fee_due")
    def delete_fee_due(due_id: int):
        return ("", 204) if dues.delete_due(due_id) else not_found("Fee due")
