"""Ledger operation usage errors"""

from mlc.errors.base import ApplicationError


class InvalidOperation(ApplicationError):
    http_code = 422
    error_code = 2001
    error = "Operation is invalid"
