"""Place authentication and session errors"""

from mlc.errors.base import ApplicationError


class InvalidCredentials(ApplicationError):
    """Unknown place and wrong password are deliberately the same error."""

    http_code = 401
    error_code = 3001
    error = "Invalid place or password"


class InvalidSignature(ApplicationError):
    http_code = 401
    error_code = 3002
    error = "Session signature is invalid"


class MalformedSession(ApplicationError):
    http_code = 401
    error_code = 3003
    error = "Session is malformed"


class SessionExpired(ApplicationError):
    http_code = 401
    error_code = 3004
    error = "Session expired"


class CSRFMismatch(ApplicationError):
    http_code = 403
    error_code = 3005
    error = "CSRF token is invalid or missing"


class AdminRequired(ApplicationError):
    http_code = 403
    error_code = 3006
    error = "Only the admin place may do this"


class SessionMissing(ApplicationError):
    http_code = 401
    error_code = 3007
    error = "Not logged in"
