from app.common.controller import BaseController


def get_controllers() -> list[type[BaseController]]:
    from app.user.user_controller import UserController

    return [UserController]
