"""
User projection - the only user fields this service ever exposes.
"""

from dataclasses import dataclass
from typing import Optional
from adoption_api.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserSummary:
    id: UserId
    name: Optional[str] = None
