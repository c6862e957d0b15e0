"""Common application errors, may be raised from several services and repositories"""

from mlc.errors.base import ApplicationError


class NotFoundError(ApplicationError):
    http_code = 404
    error_code = 1404
    error = "Not found"


class InternalError(ApplicationError):
    """Storage or cryptographic primitive failure. The only error worth a retry."""

    http_code = 500
    error_code = 1500
    error = "Internal error"
