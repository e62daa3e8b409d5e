"""
Email service with provider abstraction.

Supports SMTP and a console provider that only logs messages, selected via
``EMAIL_PROVIDER``.
"""

import ssl
from abc import ABC, abstractmethod
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import List, Optional, Tuple

import aiosmtplib

from skillswapper.application.interfaces.services import ConnectionMailerInterface
from skillswapper.config.logging import get_logger
from skillswapper.config.settings import Settings, settings
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.matched_skills import MatchedSkills

from .templates import connection_accepted_to_accepter, connection_accepted_to_requester

logger = get_logger(__name__)


class BaseEmailProvider(ABC):
    """Abstract base class for email delivery providers."""

    @abstractmethod
    async def send(self, to_email: str, subject: str, html_body: str, text_body: str) -> bool:
        """Send an email. Returns True on success."""
        ...


class SMTPProvider(BaseEmailProvider):
    """Send emails via SMTP using aiosmtplib."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_address: str,
        from_name: str,
        use_tls: bool = True,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_address = from_address
        self.from_name = from_name
        self.use_tls = use_tls

    def build_message(self, to_email: str, subject: str, html_body: str, text_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = f"{self.from_name} <{self.from_address}>"
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.attach(MIMEText(text_body, "plain", "utf-8"))
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        return msg

    async def send(self, to_email: str, subject: str, html_body: str, text_body: str) -> bool:
        """Send via SMTP."""
        msg = self.build_message(to_email, subject, html_body, text_body)

        try:
            tls_context = ssl.create_default_context() if self.use_tls else None
            await aiosmtplib.send(
                msg,
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=self.use_tls,
                tls_context=tls_context,
            )
            logger.info("Email sent", to=to_email, subject=subject, provider="smtp")
            return True
        except Exception:
            logger.exception("Email send failed", to=to_email, provider="smtp")
            return False


class ConsoleEmailProvider(BaseEmailProvider):
    """Log emails instead of delivering them. Used in development and tests."""

    def __init__(self) -> None:
        self.outbox: List[Tuple[str, str, str]] = []

    async def send(self, to_email: str, subject: str, html_body: str, text_body: str) -> bool:
        self.outbox.append((to_email, subject, text_body))
        logger.info("Email logged", to=to_email, subject=subject, provider="console")
        return True


def create_email_provider(config: Optional[Settings] = None) -> BaseEmailProvider:
    """Create email provider based on configuration."""
    config = config or settings
    provider_name = config.EMAIL_PROVIDER.lower()

    if provider_name == "smtp":
        return SMTPProvider(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            from_address=config.EMAIL_FROM_ADDRESS,
            from_name=config.EMAIL_FROM_NAME,
            use_tls=config.SMTP_USE_TLS,
        )
    if provider_name == "console":
        return ConsoleEmailProvider()
    raise ValueError(f"Unsupported email provider: {provider_name}")


class EmailService(ConnectionMailerInterface):
    """Renders connection emails and hands them to a provider."""

    def __init__(
        self,
        provider: Optional[BaseEmailProvider] = None,
        frontend_url: Optional[str] = None,
    ) -> None:
        self.provider = provider or create_email_provider()
        self.frontend_url = frontend_url or settings.FRONTEND_URL

    async def send_connection_accepted_to_requester(
        self, requester: User, accepter: User, skills: MatchedSkills
    ) -> bool:
        subject, html_body, text_body = connection_accepted_to_requester(
            requester, accepter, skills, self.frontend_url
        )
        return await self.provider.send(requester.email, subject, html_body, text_body)

    async def send_connection_accepted_to_accepter(
        self, accepter: User, requester: User, skills: MatchedSkills
    ) -> bool:
        subject, html_body, text_body = connection_accepted_to_accepter(
            accepter, requester, skills, self.frontend_url
        )
        return await self.provider.send(accepter.email, subject, html_body, text_body)


_email_service: Optional[EmailService] = None


def get_email_service() -> EmailService:
    """Get or create the email service singleton."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service


def reset_email_service() -> None:
    """Reset the email service singleton (for testing)."""
    global _email_service
    _email_service = None
