from typing import Optional

from loguru import logger

from app.common.exceptions import InvalidArgumentException, NotFoundException, NullArgumentException
from app.user import User
from app.user.user_repository import IUserRepository


class UserService:
    """
    Validates user requests and delegates them to the repository.
    Errors raised by the repository are passed to the caller untouched.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        self._require_valid_id(user_id)
        user = self.user_repository.get_user_by_id(user_id)
        if user is None:
            raise NotFoundException("User not found")
        return user

    def list_users(self) -> Optional[list[User]]:
        # None from the repository is returned as is, not replaced by an empty list
        return self.user_repository.get_all_users()

    def add_user(self, user: Optional[User]) -> None:
        if user is None:
            logger.debug("Rejected add_user: user is None")
            raise NullArgumentException("user")
        if user.username is None or not user.username.strip():
            logger.debug(f"Rejected add_user: blank username for user {user.id}")
            raise InvalidArgumentException("Username is required")
        self.user_repository.create_user(user)

    def remove_user(self, user_id: int) -> bool:
        self._require_valid_id(user_id)
        return self.user_repository.delete_user(user_id)

    @staticmethod
    def _require_valid_id(user_id: int) -> None:
        if user_id <= 0:
            logger.debug(f"Rejected non-positive user id {user_id}")
            raise InvalidArgumentException("Id must be greater than zero")
