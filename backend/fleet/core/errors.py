"""Errors raised by services and the auth gate.

Each carries the HTTP status and the message the API answers with; the
handlers in ``fleet.main`` render them as ``{"error": message}``.
"""


class AppError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class AuthError(AppError):
    status_code = 401
    message = "Unauthorized"


class NoToken(AuthError):
    message = "No token"


class InvalidToken(AuthError):
    message = "Invalid token"


class CredentialError(AppError):
    status_code = 400


class UserNotFound(CredentialError):
    message = "User not found"


class WrongPassword(CredentialError):
    message = "Wrong password"


class DuplicateUsername(CredentialError):
    message = "Username already exists"


class VehicleNotFound(AppError):
    status_code = 404
    message = "Vehicle not found"
