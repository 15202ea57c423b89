from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.common.entities import BaseEntity


class UserEntity(BaseEntity):
    """
    Represents a user in the system.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, doc="Unique Identifier of the User")
    username: Mapped[str] = mapped_column(nullable=False, doc="Username of the User")
