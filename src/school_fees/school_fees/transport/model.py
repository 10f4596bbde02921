from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TransportationRoute:
    """Domain entity: a school bus route."""

    route_id: int
    route_name: str
    description: Optional[str]
    distance: float
    fare: float
    is_active: bool = True
    created_at: Optional[datetime] = None
