from typing import Callable, Generator
from unittest.mock import MagicMock, patch
from fastapi import FastAPI
import pytest
from app.common.controller import BaseController
from app.user.user_repository import IUserRepository
from app.user.user_services import UserService


@pytest.fixture(scope="module")
def build_app() -> Callable[[list[type[BaseController]]], FastAPI]:
    def _make_app(controllers: list[type[BaseController]]) -> FastAPI:
        """Builds a FastAPI application with the provided controller."""
        app = FastAPI()
        for controller in controllers:
            app.include_router(controller().router)
        return app

    return _make_app


@pytest.fixture
def mock_repository() -> MagicMock:
    """A repository double that records every call made by the service."""
    return MagicMock(spec=IUserRepository)


@pytest.fixture
def user_service(mock_repository: MagicMock) -> UserService:
    return UserService(mock_repository)


@pytest.fixture
def mock_user_service() -> Generator[MagicMock, None, None]:
    """
    Patch ServiceFactory.get_user_service with a plain function
    returning a MagicMock, so the router's Depends() picks up the fake.
    The patch must be active before the controller builds its router.
    """
    fake_service = MagicMock(spec=UserService)

    def _fake_get_user_service():
        return fake_service

    with patch("app.common.config.ServiceFactory.get_user_service", new=_fake_get_user_service):
        yield fake_service
