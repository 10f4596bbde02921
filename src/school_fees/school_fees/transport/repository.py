from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import TransportationRoute


class TransportationRouteRepository(Protocol):
    """Repository interface for transportation routes.

    Services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, route_id: int) -> Optional[TransportationRoute]:
        raise NotImplementedError

    def list_all(self, *, active_only: bool = False) -> Sequence[TransportationRoute]:
        raise NotImplementedError

    def create(self, **fields: Any) -> TransportationRoute:
        raise NotImplementedError

    def update(self, route_id: int, changes: Mapping[str, Any]) -> Optional[TransportationRoute]:
        raise NotImplementedError

    def delete(self, route_id: int) -> bool:
        raise NotImplementedError
