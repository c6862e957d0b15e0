"""Place provisioning errors"""

from mlc.errors.base import ApplicationError


class PlaceAlreadyExists(ApplicationError):
    http_code = 409
    error_code = 4001
    error = "Place already exists"


class InvalidPlaceName(ApplicationError):
    http_code = 422
    error_code = 4002
    error = "Place name is invalid"
