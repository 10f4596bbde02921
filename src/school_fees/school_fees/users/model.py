from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a staff account.

    Note: only the password hash is kept, never the password itself.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    full_name: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None
