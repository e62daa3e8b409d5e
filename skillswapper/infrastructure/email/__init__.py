"""
Email delivery package.
"""

from .service import (
    BaseEmailProvider,
    ConsoleEmailProvider,
    EmailService,
    SMTPProvider,
    create_email_provider,
    get_email_service,
    reset_email_service,
)

__all__ = [
    "BaseEmailProvider",
    "ConsoleEmailProvider",
    "EmailService",
    "SMTPProvider",
    "create_email_provider",
    "get_email_service",
    "reset_email_service",
]
