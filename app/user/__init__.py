from typing import Optional, Self
from pydantic import BaseModel

from app.user.user_entities import UserEntity


class User(BaseModel):
    """Represents a user in the system."""

    id: int = 0
    username: Optional[str] = None

    @classmethod
    def from_entity(cls, entity: UserEntity) -> Self:
        return cls(id=entity.id, username=entity.username)
