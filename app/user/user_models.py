from typing import Optional, Self
from pydantic import BaseModel, Field

from app.user import User


class UserCreateRequest(BaseModel):
    id: int = Field(default=0, description="Identifier to store the user under, 0 lets the store assign one")
    username: Optional[str] = Field(default=None, description="The username of the user")

    def to_user(self) -> User:
        return User(id=self.id, username=self.username)


class UserResponse(BaseModel):
    id: int
    username: str = Field(..., description="The username of the user")

    @classmethod
    def from_user(cls, user: User) -> Self:
        return cls(id=user.id, username=user.username)


class UserDeleteResponse(BaseModel):
    deleted: bool
