class InvalidArgumentException(ValueError):
    """Exception raised when an argument fails validation."""

    def __init__(self, message: str = "Value does not fall within the expected range."):
        super().__init__(message)


class NullArgumentException(InvalidArgumentException):
    """Exception raised when a required argument is missing altogether."""

    def __init__(self, param_name: str, message: str = "Value cannot be null."):
        self.param_name = param_name
        super().__init__(f"{message} (Parameter '{param_name}')")


class NotFoundException(Exception):
    """Exception raised when a requested resource is not found."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
