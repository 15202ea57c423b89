from abc import ABC, abstractmethod
import threading
from typing import Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.common.repositories import BaseRepository
from app.user import User
from app.user.user_entities import UserEntity


class IUserRepository(ABC):
    """
    Storage contract for users.
    Implementations return None for a missing user and let their own failures propagate.
    """

    @abstractmethod
    def get_user_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def get_all_users(self) -> Optional[list[User]]: ...

    @abstractmethod
    def create_user(self, user: User) -> None: ...

    @abstractmethod
    def delete_user(self, user_id: int) -> bool: ...


class UserRepository(BaseRepository, IUserRepository):
    """Repository for user-related database operations."""

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by their ID."""
        logger.debug(f"Looking up user {user_id}")
        entity = self.session.get(UserEntity, user_id)
        if entity is None:
            return None
        return User.from_entity(entity)

    def get_all_users(self) -> list[User]:
        """Retrieve every user, ordered by ID."""
        entities = self.session.scalars(select(UserEntity).order_by(UserEntity.id)).all()
        return [User.from_entity(e) for e in entities]

    def create_user(self, user: User) -> None:
        """Persist a new user. A non-positive ID lets the database assign one."""
        entity = UserEntity(username=user.username)
        if user.id > 0:
            entity.id = user.id
        try:
            self.session.add(entity)
            self.commit()
        except SQLAlchemyError:
            self.rollback()
            raise
        logger.info(f"Created user {entity.id} ({entity.username})")

    def delete_user(self, user_id: int) -> bool:
        """Delete a user by their ID."""
        entity = self.session.get(UserEntity, user_id)
        if entity is None:
            return False
        try:
            self.session.delete(entity)
            self.commit()
        except SQLAlchemyError:
            self.rollback()
            raise
        logger.info(f"Deleted user {user_id}")
        return True


class InMemoryUserRepository(IUserRepository):
    """Dict backed repository for local runs and tests."""

    def __init__(self, users: Optional[list[User]] = None):
        self._users: dict[int, User] = {}
        self._lock = threading.Lock()
        for user in users or []:
            self._users[user.id] = user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        logger.debug(f"Looking up user {user_id}")
        return self._users.get(user_id)

    def get_all_users(self) -> list[User]:
        with self._lock:
            return [self._users[user_id] for user_id in sorted(self._users)]

    def create_user(self, user: User) -> None:
        # id assignment and insert must not interleave across threadpool workers
        with self._lock:
            if user.id <= 0:
                user = user.model_copy(update={"id": max(self._users, default=0) + 1})
            elif user.id in self._users:
                raise ValueError(f"User with ID {user.id} already exists.")
            self._users[user.id] = user
        logger.info(f"Created user {user.id} ({user.username})")

    def delete_user(self, user_id: int) -> bool:
        if self._users.pop(user_id, None) is None:
            return False
        logger.info(f"Deleted user {user_id}")
        return True
