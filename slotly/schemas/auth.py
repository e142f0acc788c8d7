from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..core.security import UserRole

# Fields are optional so that missing values reach the service and produce
# the same 400 response as empty ones.
class UserRegister(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: UserRole

class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Logged in successfully!"
    token: str
    token_type: str = "bearer"
    username: str
    user_id: str = Field(alias="userId")
