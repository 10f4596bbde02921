from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import clean_fields, require_non_empty, require_non_negative
from ..core.exceptions import ValidationError
from .model import TransportationRoute
from .repository import TransportationRouteRepository

logger = logging.getLogger(__name__)

_COERCERS = {
    "route_name": lambda v: require_non_empty(v, "Route name"),
    "distance": lambda v: require_non_negative(v, "Distance"),
    "fare": lambda v: require_non_negative(v, "Fare"),
}


class TransportationRouteService:
    """Use case: manage bus routes."""

    def __init__(self, routes: TransportationRouteRepository):
        self._routes = routes

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        fields = clean_fields(
            TransportationRoute,
            data,
            coercers=_COERCERS,
            exclude=("route_id", "created_at"),
            partial=partial,
        )
        if "is_active" in fields and not isinstance(fields["is_active"], bool):
            raise ValidationError("is_active must be true or false")
        return fields

    def get_route(self, route_id: int) -> Optional[TransportationRoute]:
        return self._routes.get_by_id(int(route_id))

    def list_routes(self, *, active_only: bool = False) -> Sequence[TransportationRoute]:
        return self._routes.list_all(active_only=active_only)

    def create_route(self, data: Mapping[str, Any]) -> TransportationRoute:
        route = self._routes.create(**self._clean(data, partial=False))
        logger.info("created route %s (%s)", route.route_id, route.route_name)
        return route

    def update_route(self, route_id: int, data: Mapping[str, Any]) -> Optional[TransportationRoute]:
        route = self._routes.update(int(route_id), self._clean(data, partial=True))
        if route:
            logger.info("updated route %s", route_id)
        return route

    def delete_route(self, route_id: int) -> bool:
        deleted = self._routes.delete(int(route_id))
        if deleted:
            logger.info("deleted route %s", route_id)
        return deleted
