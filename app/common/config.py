import os
from sqlalchemy.orm import Session

from app.common.db_connect import SessionLocal
from app.user.user_repository import InMemoryUserRepository, IUserRepository, UserRepository
from app.user.user_services import UserService


# Application configuration settings
class AppConfig:
    """Global application configuration settings"""

    # Repository backend: 'sql' or 'memory'
    # Can be overridden by environment variable USER_REPOSITORY
    USER_REPOSITORY = os.getenv("USER_REPOSITORY", "sql").lower()

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# ----- Service and Repository Factories -----
class SessionFactory:
    @staticmethod
    def get_session() -> Session:
        return SessionLocal()


class ServiceFactory:
    @staticmethod
    def get_user_service() -> UserService:
        return UserService(RepositoryFactory.get_user_repository())


class RepositoryFactory:
    _in_memory_user_repository: InMemoryUserRepository | None = None

    @staticmethod
    def get_user_repository() -> IUserRepository:
        if AppConfig.USER_REPOSITORY == "memory":
            return RepositoryFactory.get_in_memory_user_repository()
        if AppConfig.USER_REPOSITORY == "sql":
            return UserRepository(session=SessionFactory.get_session())
        raise ValueError(f"Unknown user repository: {AppConfig.USER_REPOSITORY}")

    @classmethod
    def get_in_memory_user_repository(cls) -> InMemoryUserRepository:
        # one store per process, otherwise every request would see an empty repository
        if cls._in_memory_user_repository is None:
            cls._in_memory_user_repository = InMemoryUserRepository()
        return cls._in_memory_user_repository
