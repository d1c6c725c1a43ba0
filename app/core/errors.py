class AppError(Exception):
    """Base for errors the HTTP layer maps to an error envelope."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 422

    def __init__(self, message: str = "Validation failed.", errors: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.errors = errors or {}


class NotFoundError(AppError):
    status_code = 404


class DuplicateEntryError(AppError):
    status_code = 409


class AuthenticationError(AppError):
    status_code = 401


# System misconfigured: no settings row, no API key, car without distance slabs
class ConfigurationError(AppError):
    status_code = 500


# Distance provider failed, timed out or returned no route
class UpstreamError(AppError):
    status_code = 500


# No suitable car for the requested party
class ComputationError(AppError):
    status_code = 422
