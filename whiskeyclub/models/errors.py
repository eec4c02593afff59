"""
Validation errors raised by document models and containers.
"""


class InvalidArgumentError(ValueError):
    """An argument has a value that is not allowed."""

    def __init__(self, param_name: str, message: str = ""):
        self.param_name = param_name
        super().__init__(message or f"'{param_name}' is invalid")


class MissingRequiredValueError(InvalidArgumentError):
    """A required argument is None or missing."""

    def __init__(self, param_name: str, message: str = ""):
        super().__init__(param_name, message or f"'{param_name}' is required")
