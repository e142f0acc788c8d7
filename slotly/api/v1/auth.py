from fastapi import APIRouter, Depends, status

from ...api.deps import get_auth_service
from ...services.auth_service import AuthService
from ...schemas.auth import UserLogin, UserRegister, TokenResponse, UserResponse

router = APIRouter(tags=["Authentication"])

@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED
)
async def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new requester account."""
    user = await auth_service.register_user(user_data.username, user_data.password)
    return UserResponse.model_validate(user)

@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: UserLogin,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Authenticate user and return an access token."""
    return await auth_service.authenticate_user(login_data.username, login_data.password)
