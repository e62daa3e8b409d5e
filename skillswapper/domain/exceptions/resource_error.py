"""
Resource lookup and uniqueness domain exceptions.
"""

from typing import Any


class NotFoundError(Exception):
    """Raised when a requested resource does not exist or is not visible."""

    def __init__(self, resource: str, identifier: Any = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(Exception):
    """Raised when a resource would violate a uniqueness rule."""

    pass


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering with an email that already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User with this email already exists")
