from __future__ import annotations

import logging

from flask import Flask, request
from werkzeug.datastructures import MultiDict

from ..common.http import error, json_body, not_found, ok
from ..container import Container
from ..core.exceptions import ValidationError
from ..students.service import list_classes
from .search_form import ReceiptSearchForm

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    receipts = container.receipt_service

    @app.route("/api/receipts", methods=["POST"], endpoint="create_receipt")
    def create_receipt():
        try:
            return ok(receipts.create_receipt(json_body()), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/receipts/<int:receipt_id>", methods=["GET"], endpoint="get_receipt")
    def get_receipt(receipt_id: int):
        receipt = receipts.get_receipt(receipt_id)
        if not receipt:
            return not_found("Receipt")
        return ok({"receipt": receipt, "items": receipts.list_items(receipt_id)})

    @app.route("/api/receipts/number/<receipt_number>", methods=["GET"], endpoint="get_receipt_by_number")
    def get_receipt_by_number(receipt_number: str):
        receipt = receipts.get_by_number(receipt_number)
        return ok(receipt) if receipt else not_found("Receipt")

    @app.route("/api/receipts/<int:receipt_id>", methods=["PATCH"], endpoint="update_receipt")
    def update_receipt(receipt_id: int):
        try:
            receipt = receipts.update_receipt(receipt_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(receipt) if receipt else not_found("Receipt")

    @app.route("/api/receipts/<int:receipt_id>", methods=["DELETE"], endpoint="delete_receipt")
    def delete_receipt(receipt_id: int):
        return ("", 204) if receipts.delete_receipt(receipt_id) else not_found("Receipt")

    @app.route("/api/students/<int:student_id>/receipts", methods=["GET"], endpoint="student_receipts")
    def student_receipts(student_id: int):
        return ok(receipts.list_by_student(student_id))

    @app.route("/api/receipts/<int:receipt_id>/items", methods=["GET"], endpoint="receipt_items")
    def receipt_items(receipt_id: int):
        return ok(receipts.list_items(receipt_id))

    @app.route("/api/receipt-items", methods=["POST"], endpoint="create_receipt_item")
    def create_receipt_item():
        try:
            return ok(receipts.create_item(json_body()), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/receipt-items/<int:item_id>", methods=["PATCH"], endpoint="update_receipt_item")
    def update_receipt_item(item_id: int):
        try:
            item = receipts.update_item(item_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(item) if item else not_found("Receipt item")

    @app.route("/api/receipt-items/<int:item_id>", methods=["DELETE"], endpoint="delete_receipt_item")
    def delete_receipt_item(item_id: int):
        return ("", 204) if receipts.delete_item(item_id) else not_found("Receipt item")

    @app.route("/api/receipts/collect", methods=["POST"], endpoint="collect_fees")
    def collect_fees():
        try:
            body = json_body()
            issued = receipts.collect_fees(
                student_id=body.get("student_id"),
                due_ids=body.get("due_ids") or [],
                payment_method=body.get("payment_method", ""),
                payment_reference=body.get("payment_reference", ""),
                remarks=body.get("remarks", ""),
            )
        except ValidationError as e:
            return error(str(e))
        return ok(issued, 201)

    @app.route("/api/receipts/search-students", methods=["POST"], endpoint="search_students_for_receipt")
    def search_students_for_receipt():
        payload = request.get_json(silent=True)
        if isinstance(payload, dict):
            # A null field means "any", the same as leaving it blank.
            formdata = MultiDict({k: v for k, v in payload.items() if v is not None})
        else:
            formdata = request.form
        form = ReceiptSearchForm(formdata, classes=list_classes())

        found = []
        if not form.submit(lambda criteria: found.extend(container.student_service.search_for_receipt(criteria))):
            logger.debug("receipt search rejected: %s", form.errors)
            return ok({"errors": {k or "form": v for k, v in form.errors.items()}}, 400)
        return ok(found)
