import asyncio

import pytest

from slotly.core.database import InMemoryDatabase
from slotly.core.exceptions import (
    DuplicateUsernameError, InvalidCredentialsError, ValidationError
)
from slotly.core.security import UserRole, verify_token
from slotly.services.auth_service import AuthService

@pytest.fixture
def auth_service():
    return AuthService(InMemoryDatabase())

class TestAuthService:

    def test_register_defaults_to_requester(self, auth_service):
        user = asyncio.run(auth_service.register_user("alice", "pw1"))

        assert user.role == UserRole.REQUESTER
        assert user.password_hash != "pw1"
        assert auth_service.db.users == [user]

    def test_register_duplicate(self, auth_service):
        asyncio.run(auth_service.register_user("alice", "pw1"))
        with pytest.raises(DuplicateUsernameError):
            asyncio.run(auth_service.register_user("alice", "other"))

    def test_concurrent_registrations_keep_usernames_unique(self, auth_service):
        async def register_twice():
            return await asyncio.gather(
                auth_service.register_user("alice", "pw1"),
                auth_service.register_user("alice", "pw2"),
                return_exceptions=True,
            )

        results = asyncio.run(register_twice())

        assert sum(isinstance(r, DuplicateUsernameError) for r in results) == 1
        assert len(auth_service.db.users) == 1

    def test_register_requires_fields(self, auth_service):
        with pytest.raises(ValidationError):
            asyncio.run(auth_service.register_user("alice", None))

    def test_verify_credentials(self, auth_service):
        user = asyncio.run(auth_service.register_user("alice", "pw1"))
        assert asyncio.run(auth_service.verify_credentials("alice", "pw1")) == user

    @pytest.mark.parametrize("username,password", [
        ("alice", "wrong"),
        ("nobody", "pw1"),
        ("Alice", "pw1"),
    ])
    def test_verify_credentials_failures_are_uniform(self, auth_service, username, password):
        asyncio.run(auth_service.register_user("alice", "pw1"))

        with pytest.raises(InvalidCredentialsError) as exc_info:
            asyncio.run(auth_service.verify_credentials(username, password))

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid credentials."

    def test_authenticate_user_issues_identity_token(self, auth_service):
        user = asyncio.run(auth_service.register_user("bob", "pw2", role=UserRole.PROVIDER))

        response = asyncio.run(auth_service.authenticate_user("bob", "pw2"))
        claim = verify_token(response.token)

        assert response.user_id == user.id
        assert claim.id == user.id
        assert claim.role == UserRole.PROVIDER

    def test_ensure_provider_is_idempotent(self, auth_service):
        first = asyncio.run(auth_service.ensure_provider("bob", "pw2"))
        second = asyncio.run(auth_service.ensure_provider("bob", "pw2"))

        assert first.role == UserRole.PROVIDER
        assert second is None
        assert len(auth_service.db.users) == 1
