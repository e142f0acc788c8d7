from datetime import datetime, timedelta
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError as PayloadValidationError
from enum import Enum

from .config import settings

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

class UserRole(str, Enum):
    REQUESTER = "requester"
    PROVIDER = "provider"

class IdentityClaim(BaseModel):
    """Verified payload of a bearer token."""
    id: str
    username: str
    role: UserRole
    exp: int

    @property
    def is_provider(self) -> bool:
        return self.role == UserRole.PROVIDER

# Token errors
class TokenError(Exception):
    """Base class for bearer token verification failures."""

class TokenMissingError(TokenError):
    pass

class TokenInvalidError(TokenError):
    pass

class TokenExpiredError(TokenError):
    pass

# Password utilities
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

def dummy_verify_password() -> bool:
    """Spend the time of a real verification; always False."""
    pwd_context.dummy_verify()
    return False

# JWT utilities
def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token."""
    to_encode = data.copy()

    if expires_delta is not None:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )
    return encoded_jwt

def create_identity_token(
    user_id: str,
    username: str,
    role: UserRole,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Issue a token carrying exactly the user's id, username and role."""
    return create_access_token(
        {"id": user_id, "username": username, "role": UserRole(role).value},
        expires_delta=expires_delta,
    )

def verify_token(token: Optional[str]) -> IdentityClaim:
    """Verify and decode a JWT, raising a TokenError subclass on failure."""
    if not token:
        raise TokenMissingError("Token is missing")

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except JWTError as e:
        raise TokenInvalidError("Token is invalid") from e

    try:
        return IdentityClaim(**payload)
    except PayloadValidationError as e:
        raise TokenInvalidError("Token payload is malformed") from e
