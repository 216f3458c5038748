class FoodTruckError(Exception):
    """Base for errors that map onto an HTTP response."""

    status_code = 500
    headers = None

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail)
        self.detail = detail


class ValidationError(FoodTruckError):
    status_code = 400


class AuthenticationError(FoodTruckError):
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(FoodTruckError):
    status_code = 403


class NotFoundError(FoodTruckError):
    status_code = 404


class ConflictError(FoodTruckError):
    status_code = 409


class PersistenceError(FoodTruckError):
    status_code = 500
