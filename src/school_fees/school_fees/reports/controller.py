from __future__ import annotations

from flask import Flask, current_app, request

from ..common.http import ok
from ..common.serialization import to_jsonable
from ..container import Container
from ..core.constants import DEFAULT_RECENT_RECEIPTS_LIMIT


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return ok(reports.dashboard_stats())

    @app.route("/api/receipts/recent", methods=["GET"], endpoint="recent_receipts")
    def recent_receipts():
        default = current_app.config.get("RECENT_RECEIPTS_LIMIT", DEFAULT_RECENT_RECEIPTS_LIMIT)
        limit = request.args.get("limit", default, type=int)
        rows = reports.recent_receipts(limit)
        return ok(
            [
                {**to_jsonable(r.receipt), "student_name": r.student_name, "grade": r.grade, "section": r.section}
                for r in rows
            ]
        )

    @app.route("/api/fee-dues/defaulters", methods=["GET"], endpoint="defaulters")
    def defaulters():
        rows = reports.defaulters()
        return ok(
            [
                {
                    **to_jsonable(r.due),
                    "student_name": r.student_name,
                    "grade": r.grade,
                    "admission_number": r.admission_number,
                }
                for r in rows
            ]
        )
