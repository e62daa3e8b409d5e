"""
Authentication and authorization domain exceptions.
"""


class AuthenticationError(Exception):
    """Raised when credentials or tokens are missing, invalid or expired."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match."""

    def __init__(self):
        super().__init__("Invalid email or password")


class AuthorizationError(Exception):
    """Raised when an authenticated caller lacks the required role."""

    pass
