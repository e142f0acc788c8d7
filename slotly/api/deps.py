from fastapi import Depends, Header, status
from typing import Optional
import logging

from ..core.database import InMemoryDatabase, get_db
from ..core.exceptions import AuthenticationError
from ..core.security import IdentityClaim, TokenError, verify_token
from ..services.auth_service import AuthService
from ..services.appointment_service import AppointmentService

logger = logging.getLogger(__name__)

def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a ``Bearer <token>`` header value, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None

def authorize(authorization: Optional[str]) -> IdentityClaim:
    """Resolve a verified identity from a raw Authorization header value.

    A missing token is a 401; any token that fails verification (bad
    signature, malformed, expired) is a 403.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Access token is missing")

    try:
        return verify_token(token)
    except TokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise AuthenticationError(
            "Invalid or expired token",
            status_code=status.HTTP_403_FORBIDDEN
        )

async def get_current_identity(
    authorization: Optional[str] = Header(None)
) -> IdentityClaim:
    """Extract and verify the bearer token of the current request."""
    return authorize(authorization)

def get_auth_service(db: InMemoryDatabase = Depends(get_db)) -> AuthService:
    return AuthService(db)

def get_appointment_service(
    db: InMemoryDatabase = Depends(get_db)
) -> AppointmentService:
    return AppointmentService(db)
