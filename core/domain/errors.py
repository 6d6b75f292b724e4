"""
Domain errors. Services raise these; the web adapter maps them to HTTP statuses.
"""


class DomainError(Exception):
    """Base class for errors a caller can act on"""
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    status = 400


class AuthenticationError(DomainError):
    status = 401


class PermissionDenied(DomainError):
    status = 403


class NotFoundError(DomainError):
    status = 404


class ConflictError(DomainError):
    status = 409
