from __future__ import annotations

import pytest

from src.school_fees.school_fees.core.exceptions import ValidationError


def _route(**overrides):
    data = {"route_name": "Lake Road", "description": "Loop around the lake", "distance": 4.5, "fare": 900}
    data.update(overrides)
    return data


def test_route_crud_round_trip(container):
    svc = container.route_service

    route = svc.create_route(_route())
    assert route.is_active is True
    assert route.created_at is not None
    assert svc.get_route(route.route_id) == route

    updated = svc.update_route(route.route_id, {"fare": 950})
    assert updated.fare == 950
    assert updated.route_name == "Lake Road"

    assert svc.delete_route(route.route_id) is True
    assert svc.get_route(route.route_id) is None
    assert svc.update_route(route.route_id, {"fare": 1}) is None


def test_list_routes_active_only(container):
    svc = container.route_service
    svc.create_route(_route())
    svc.create_route(_route(route_name="Old Town", is_active=False))

    assert len(svc.list_routes()) == 2
    assert [r.route_name for r in svc.list_routes(active_only=True)] == ["Lake Road"]


def test_route_validation(container):
    svc = container.route_service
    with pytest.raises(ValidationError):
        svc.create_route(_route(fare=-5))
    with pytest.raises(ValidationError):
        svc.create_route(_route(is_active="yes"))
    with pytest.raises(ValidationError):
        svc.create_route({"route_name": "Missing rest"})


def test_seeded_students_by_route(seeded):
    riders = seeded.student_service.list_by_route(3)

    assert [s.student_name for s in riders] == ["Neha Patel"]
    assert seeded.route_service.get_route(3).route_name == "East Zone"
