from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.memory import MemoryTable
from .model import TransportationRoute
from .repository import TransportationRouteRepository


class InMemoryTransportationRouteRepository(TransportationRouteRepository):
    def __init__(self):
        self._table: MemoryTable[TransportationRoute] = MemoryTable(TransportationRoute, key_field="route_id")

    def get_by_id(self, route_id: int) -> Optional[TransportationRoute]:
        return self._table.get(route_id)

    def list_all(self, *, active_only: bool = False) -> Sequence[TransportationRoute]:
        if active_only:
            return self._table.filter(lambda r: r.is_active)
        return self._table.all()

    def create(self, **fields: Any) -> TransportationRoute:
        return self._table.insert(**fields, created_at=now_local())

    def update(self, route_id: int, changes: Mapping[str, Any]) -> Optional[TransportationRoute]:
        return self._table.update(route_id, changes)

    def delete(self, route_id: int) -> bool:
        return self._table.delete(route_id)
