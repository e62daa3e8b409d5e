"""
HS256 JWT access tokens.

Tokens carry the user id in ``sub`` and a ``role`` claim (``user`` or
``admin``). Issuer and audience are always checked on decode.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from skillswapper.application.interfaces.services import TokenServiceInterface
from skillswapper.config.settings import Settings, settings
from skillswapper.domain.exceptions.auth_error import AuthenticationError


class JWTTokenService(TokenServiceInterface):
    """Issue and verify signed access tokens."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings

    def create_access_token(self, subject: str, role: str = "user", **claims: Any) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": str(subject),
            "role": role,
            "iat": now,
            "exp": now + timedelta(minutes=self.config.ACCESS_TOKEN_EXPIRE_MINUTES),
            "iss": self.config.JWT_ISSUER,
            "aud": self.config.JWT_AUDIENCE,
            **claims,
        }
        return jwt.encode(payload, self.config.JWT_SECRET_KEY, algorithm=self.config.JWT_ALGORITHM)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a token.

        Raises:
            AuthenticationError: If the token is invalid or expired.
        """
        try:
            return jwt.decode(
                token,
                self.config.JWT_SECRET_KEY,
                algorithms=[self.config.JWT_ALGORITHM],
                issuer=self.config.JWT_ISSUER,
                audience=self.config.JWT_AUDIENCE,
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired") from None
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token") from None
