from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Invalid request"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )

class InvalidCredentialsError(HTTPException):
    # Same response for unknown usernames and wrong passwords.
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials.",
        )

class ConflictError(HTTPException):
    def __init__(self, detail: str = "Resource conflict"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )

class DuplicateUsernameError(ConflictError):
    def __init__(self):
        super().__init__("Username already taken.")

class SlotConflictError(ConflictError):
    def __init__(self):
        super().__init__("This time slot is already booked.")

class AuthenticationError(HTTPException):
    """Missing token (401) or a token that failed verification (403)."""

    def __init__(
        self,
        detail: str = "Could not validate credentials",
        status_code: int = status.HTTP_401_UNAUTHORIZED,
    ):
        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )

class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

class InternalError(HTTPException):
    def __init__(self, detail: str = "An unexpected error occurred"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
