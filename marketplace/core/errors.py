class ApiError(Exception):
    """Business-rule failure surfaced to the client as ``{"detail", "code"}``."""

    status_code = 500
    code = "INTERNAL"
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthenticationRequired(ApiError):
    status_code = 401
    code = "AUTHENTICATION_REQUIRED"
    default_detail = "Not authenticated"


class InvalidCredentials(ApiError):
    status_code = 401
    code = "INVALID_CREDENTIALS"
    default_detail = "Invalid credentials"


class AuthorizationDenied(ApiError):
    status_code = 403
    code = "AUTHORIZATION_DENIED"
    default_detail = "Invalid or expired token"


class InsufficientPrivilege(ApiError):
    status_code = 403
    code = "INSUFFICIENT_PRIVILEGE"
    default_detail = "Only a super-admin can grant super-admin"


class NotFound(ApiError):
    status_code = 404
    code = "NOT_FOUND"
    default_detail = "Not found"


class Conflict(ApiError):
    status_code = 409
    code = "CONFLICT"
    default_detail = "Already exists"


class InsufficientFunds(ApiError):
    status_code = 400
    code = "INSUFFICIENT_FUNDS"
    default_detail = "Insufficient balance to publish this ad"


class ValidationFailed(ApiError):
    status_code = 422
    code = "VALIDATION_FAILED"
    default_detail = "Invalid input"


class InternalError(ApiError):
    pass
