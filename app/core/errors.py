"""API error types. Each one knows its HTTP status and JSON body."""
from enum import Enum


class AuthFailure(str, Enum):
    """Why a request could not be authenticated. Server-side logs only."""

    NO_CREDENTIALS = "no_credentials"
    UNKNOWN_USER = "unknown_user"
    BAD_PASSWORD = "bad_password"


class ApiError(Exception):
    """Base for errors that map straight onto a client response."""

    status_code: int = 500
    headers: dict[str, str] | None = None

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"message": self.message}


class NotAuthorized(ApiError):
    """Any authentication failure. The reason stays on the server."""

    status_code = 401
    headers = {"WWW-Authenticate": 'Basic realm="api"'}

    def __init__(self, reason: AuthFailure):
        super().__init__("Not Authorized")
        self.reason = reason


class AccessDenied(ApiError):
    status_code = 403

    def __init__(self):
        super().__init__("Access Denied")


class ResourceNotFound(ApiError):
    status_code = 404

    def __init__(self, resource: str):
        super().__init__(f"No {resource} found")
        self.resource = resource


class ValidationFailed(ApiError):
    status_code = 400

    def __init__(self, errors: list[str]):
        super().__init__("Validation failed")
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": self.errors}


class EmailTaken(ApiError):
    status_code = 400

    def __init__(self):
        super().__init__("The email you have entered already exists, please enter a new one")
