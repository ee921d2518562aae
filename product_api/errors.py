# product_api/errors.py
from typing import Any, Dict

# Typed failures raised by handlers. The exception handlers in main.py turn
# them into responses.

FORBIDDEN_MESSAGE = "Forbidden: Invalid or missing API Key"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class AppError(Exception):
    name = "AppError"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": {"name": self.name, "message": self.message}}


class ValidationError(AppError):
    name = "ValidationError"
    status_code = 400


class NotFoundError(AppError):
    name = "NotFoundError"
    status_code = 404


class ForbiddenError(AppError):
    name = "ForbiddenError"
    status_code = 403

    def __init__(self, message: str = FORBIDDEN_MESSAGE):
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        # legacy shape, older clients read the top-level message
        return {"message": self.message}


def error_payload(name: str, message: str) -> Dict[str, Any]:
    return {"error": {"name": name, "message": message}}


def internal_error_payload() -> Dict[str, Any]:
    return error_payload("InternalServerError", INTERNAL_ERROR_MESSAGE)
