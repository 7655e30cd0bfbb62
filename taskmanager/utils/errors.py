"""Application error taxonomy.

Services raise these; the app-level handlers in ``taskmanager.main`` map each
one to its HTTP status and the ``{error, message, statusCode}`` body, where
``error`` is the class's ``kind``.
"""


class AppError(Exception):
    status_code = 500
    kind = "AppError"

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400
    kind = "ValidationError"


class AuthenticationError(AppError):
    status_code = 401
    kind = "AuthenticationError"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised for tampered, malformed and expired tokens alike.

    Reports the ``AuthenticationError`` kind, same as a missing header.
    """

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class AuthorizationError(AppError):
    status_code = 403
    kind = "AuthorizationError"

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404
    kind = "NotFoundError"

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource
