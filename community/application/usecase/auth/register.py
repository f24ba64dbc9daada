"""Register use case."""

from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.service import UserService


class RegisterRequest(BaseModel):
    """Password account registration request.

    Fields are optional here so that missing values reach the domain and are
    reported with the same message as blank ones.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None


class RegisterResponse(BaseModel):
    """Register response."""

    message: str
    user_id: str
    username: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating a password account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration.

        Raises:
            ValidationError: If a field is missing or the password is too short
            ConflictError: If the username or email is already in use
        """
        user = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        return RegisterResponse(
            message="Registration successful! You can now log in.",
            user_id=str(user.id),
            username=user.username.root,
        )
