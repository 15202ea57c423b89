from fastapi import APIRouter, Depends, HTTPException, Response

from app.common.config import ServiceFactory
from app.common.controller import BaseController
from app.common.exceptions import InvalidArgumentException, NotFoundException
from app.user.user_models import UserCreateRequest, UserDeleteResponse, UserResponse
from app.user.user_services import UserService


class UserController(BaseController):
    prefix = "users"

    @property
    def router(self) -> APIRouter:
        """
        Returns the APIRouter instance for the UserController.
        Validation failures map to 400 and missing users to 404; anything else is left to the server.
        """

        @self.api_router.get(
            "",
            response_model=list[UserResponse],
            responses={200: {"description": "Returns every stored user"}},
        )
        def list_users(user_service: UserService = Depends(ServiceFactory.get_user_service)) -> list[UserResponse]:
            users = user_service.list_users()
            return [UserResponse.from_user(user) for user in users or []]

        @self.api_router.get(
            "/{user_id}",
            response_model=UserResponse,
            responses={400: {"description": "Invalid user id"}, 404: {"description": "User not found"}},
        )
        def get_user(user_id: int, user_service: UserService = Depends(ServiceFactory.get_user_service)) -> UserResponse:
            try:
                user = user_service.get_user(user_id)
            except InvalidArgumentException as e:
                raise HTTPException(status_code=400, detail=str(e)) from e
            except NotFoundException as e:
                raise HTTPException(status_code=404, detail=str(e)) from e
            return UserResponse.from_user(user)

        @self.api_router.post(
            "",
            status_code=201,
            response_class=Response,
            responses={201: {"description": "User created"}, 400: {"description": "Username is required"}},
        )
        def create_user(request: UserCreateRequest, user_service: UserService = Depends(ServiceFactory.get_user_service)) -> Response:
            try:
                user_service.add_user(request.to_user())
            except InvalidArgumentException as e:
                raise HTTPException(status_code=400, detail=str(e)) from e
            return Response(status_code=201)

        @self.api_router.delete(
            "/{user_id}",
            response_model=UserDeleteResponse,
            responses={400: {"description": "Invalid user id"}},
        )
        def delete_user(user_id: int, user_service: UserService = Depends(ServiceFactory.get_user_service)) -> UserDeleteResponse:
            try:
                deleted = user_service.remove_user(user_id)
            except InvalidArgumentException as e:
                raise HTTPException(status_code=400, detail=str(e)) from e
            return UserDeleteResponse(deleted=deleted)

        return self.api_router
