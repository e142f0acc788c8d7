from dataclasses import dataclass, field
import uuid

from ..core.security import UserRole

def generate_id() -> str:
    return uuid.uuid4().hex

@dataclass(frozen=True)
class User:
    username: str
    password_hash: str
    role: UserRole = UserRole.REQUESTER
    id: str = field(default_factory=generate_id)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role.value}')>"
