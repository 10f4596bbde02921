from __future__ import annotations

from flask import Flask, request

from ..common.http import error, json_body, not_found, ok
from ..container import Container
from ..core.exceptions import ValidationError
from .service import list_classes


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    def classes():
        return ok([{"id": c.class_id, "name": c.name} for c in list_classes()])

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        query = request.args.get("q", "")
        grade = request.args.get("grade", "")
        if query:
            return ok(students.search_students(query, grade=grade))
        if grade:
            return ok(students.list_by_grade(grade))
        return ok(students.list_students())

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            return ok(students.create_student(json_body()), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: int):
        student = students.get_student(student_id)
        return ok(student) if student else not_found("Student")

    @app.route("/api/students/admission/<admission_number>", methods=["GET"], endpoint="get_student_by_admission")
    def get_student_by_admission(admission_number: str):
        student = students.get_by_admission_number(admission_number)
        return ok(student) if student else not_found("Student")

    @app.route("/api/students/<int:student_id>", methods=["PATCH"], endpoint="update_student")
    def update_student(student_id: int):
        try:
            student = students.update_student(student_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(student) if student else not_found("Student")

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        return ("", 204) if students.delete_student(student_id) else not_found("Student")
