"""
Domain errors raised by the services and translated to HTTP by
``vendetta.middleware.ReputationErrorMiddleware``.
"""


class ReputationError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationFailure(ReputationError):
    """Bad or missing login signature, or no active session."""

    status_code = 401
    default_message = "Authentication required"


class ConfigurationError(ReputationError):
    status_code = 500
    default_message = "Server is misconfigured"


class ValidationError(ReputationError):
    status_code = 400
    default_message = "Invalid request"


class NotFound(ReputationError):
    status_code = 404
    default_message = "Not found"
