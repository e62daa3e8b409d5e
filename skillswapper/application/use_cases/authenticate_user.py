"""Registration, login and token verification use cases."""

from dataclasses import dataclass, field
from typing import List, Optional

from skillswapper.application.interfaces.repositories import (
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.interfaces.services import (
    PasswordHasherInterface,
    TokenServiceInterface,
    TransactionServiceInterface,
)
from skillswapper.config.logging import get_logger
from skillswapper.config.settings import Settings, settings
from skillswapper.domain.entities.user import SkillProfile, User
from skillswapper.domain.exceptions.auth_error import (
    AuthenticationError,
    InvalidCredentialsError,
)
from skillswapper.domain.exceptions.resource_error import (
    EmailAlreadyRegisteredError,
    NotFoundError,
)
from skillswapper.domain.value_objects.skill_input import SkillInput

logger = get_logger(__name__)

ADMIN_ROLE = "admin"
USER_ROLE = "user"


@dataclass
class RegisterRequest:
    """Request for creating an account."""

    name: str
    email: str
    password: str
    bio: Optional[str] = None
    location: Optional[str] = None
    skills_have: List[SkillInput] = field(default_factory=list)
    skills_want: List[SkillInput] = field(default_factory=list)


@dataclass
class AuthResult:
    """Issued token and the authenticated user's profile."""

    token: str
    profile: SkillProfile


class AuthenticateUserUseCase:
    """Use case for accounts and access tokens."""

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        skill_repo: SkillRepositoryInterface,
        hasher: PasswordHasherInterface,
        tokens: TokenServiceInterface,
        transaction_service: TransactionServiceInterface,
        config: Optional[Settings] = None,
    ):
        self.user_repo = user_repo
        self.skill_repo = skill_repo
        self.hasher = hasher
        self.tokens = tokens
        self.transaction_service = transaction_service
        self.config = config or settings

    async def register(self, request: RegisterRequest) -> AuthResult:
        email = request.email.strip().lower()
        if await self.user_repo.get_by_email(email):
            raise EmailAlreadyRegisteredError(email)

        async def operation() -> User:
            user = await self.user_repo.create(
                User(
                    name=request.name.strip(),
                    email=email,
                    password_hash=self.hasher.hash(request.password),
                    bio=request.bio,
                    location=request.location,
                )
            )
            for skill in request.skills_have:
                catalog_skill = await self.skill_repo.find_or_create(skill.name)
                await self.skill_repo.add_have(user.id, catalog_skill.id, skill.level)
            for skill in request.skills_want:
                catalog_skill = await self.skill_repo.find_or_create(skill.name)
                await self.skill_repo.add_want(user.id, catalog_skill.id, skill.level)
            return user

        user = await self.transaction_service.execute_in_transaction(operation)
        logger.info(
            "User registered",
            user_id=user.id,
            skills_have=len(request.skills_have),
            skills_want=len(request.skills_want),
        )
        return AuthResult(token=self._issue(user), profile=await self._profile(user.id))

    async def login(self, email: str, password: str) -> AuthResult:
        user = await self.user_repo.get_by_email(email.strip().lower())
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Failed login attempt", email=email)
            raise InvalidCredentialsError()

        logger.info("User logged in", user_id=user.id)
        return AuthResult(token=self._issue(user), profile=await self._profile(user.id))

    async def verify(self, token: str) -> SkillProfile:
        """Resolve a token to the user's current profile."""
        claims = self.tokens.decode(token)
        return await self._profile(self.user_id_from_claims(claims))

    def admin_login(self, email: str, password: str) -> str:
        """Issue an admin token for the configured admin credentials."""
        admin_email = self.config.ADMIN_EMAIL
        admin_hash = self.config.ADMIN_PASSWORD_HASH
        if not admin_email or not admin_hash:
            logger.warning("Admin login attempted without configured credentials")
            raise InvalidCredentialsError()
        if email.strip().lower() != admin_email.strip().lower() or not self.hasher.verify(
            password, admin_hash
        ):
            logger.warning("Failed admin login attempt", email=email)
            raise InvalidCredentialsError()

        logger.info("Admin logged in")
        return self.tokens.create_access_token(
            "admin", role=ADMIN_ROLE, name=self.config.ADMIN_NAME
        )

    @staticmethod
    def user_id_from_claims(claims: dict) -> int:
        if claims.get("role", USER_ROLE) != USER_ROLE:
            raise AuthenticationError("Invalid token")
        try:
            return int(claims["sub"])
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token") from None

    def _issue(self, user: User) -> str:
        return self.tokens.create_access_token(str(user.id), role=USER_ROLE, email=user.email)

    async def _profile(self, user_id: int) -> SkillProfile:
        profile = await self.user_repo.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User", user_id)
        return profile
