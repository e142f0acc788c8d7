from fastapi.concurrency import run_in_threadpool
from typing import Optional
import logging

from ..core.database import InMemoryDatabase
from ..core.exceptions import (
    ValidationError, DuplicateUsernameError, InvalidCredentialsError,
    InternalError
)
from ..core.security import (
    verify_password, get_password_hash, dummy_verify_password,
    create_identity_token, UserRole
)
from ..models.user import User
from ..schemas.auth import TokenResponse

logger = logging.getLogger(__name__)

def _require_credentials(username: Optional[str], password: Optional[str]):
    if not username or not password:
        raise ValidationError("Username and password are required.")

class AuthService:
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    async def register_user(
        self,
        username: Optional[str],
        password: Optional[str],
        role: UserRole = UserRole.REQUESTER
    ) -> User:
        """Register a new user."""
        _require_credentials(username, password)

        if self.db.find_user(username):
            raise DuplicateUsernameError()

        try:
            hashed_password = await run_in_threadpool(get_password_hash, password)
        except Exception:
            logger.exception("Error during registration")
            raise InternalError("Server error during registration.")

        # Another registration may have completed while hashing
        if self.db.find_user(username):
            raise DuplicateUsernameError()

        new_user = User(
            username=username,
            password_hash=hashed_password,
            role=role
        )
        self.db.users.append(new_user)
        logger.info(f"New user registered: {username} ({new_user.role.value})")

        return new_user

    async def verify_credentials(self, username: str, password: str) -> User:
        """Return the matching user or raise InvalidCredentialsError."""
        user = self.db.find_user(username)

        try:
            if user is None:
                matches = await run_in_threadpool(dummy_verify_password)
            else:
                matches = await run_in_threadpool(
                    verify_password, password, user.password_hash
                )
        except Exception:
            logger.exception("Error during login")
            raise InternalError("Server error during login.")

        if not matches:
            logger.warning(f"Failed login attempt for username: {username}")
            raise InvalidCredentialsError()

        return user

    async def authenticate_user(
        self,
        username: Optional[str],
        password: Optional[str]
    ) -> TokenResponse:
        """Authenticate user and return an access token."""
        _require_credentials(username, password)

        user = await self.verify_credentials(username, password)
        token = create_identity_token(user.id, user.username, user.role)
        logger.info(f"User logged in: {username}")

        return TokenResponse(
            token=token,
            username=user.username,
            user_id=user.id
        )

    async def ensure_provider(self, username: str, password: str) -> Optional[User]:
        """Register a provider account unless the username already exists."""
        if self.db.find_user(username):
            return None
        return await self.register_user(username, password, role=UserRole.PROVIDER)
