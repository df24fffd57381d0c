# Local application imports
from ....core.exceptions import InvalidCredentialsError
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.password_hasher import PasswordHasher
from ....domain.models.user import normalize_email
from ...dto.auth_dto import UserLoginRequest
from ...dto.user_dto import UserResponse


class LoginUserUseCase:
    """Use case for checking a user's credentials"""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: UserLoginRequest) -> UserResponse:
        """
        Authenticate user

        Args:
            request: Login request with email and password

        Returns:
            UserResponse of the authenticated user

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (same error for both)
        """
        user = await self.user_repository.find_by_email(normalize_email(request.email))
        if user is None:
            await self.password_hasher.verify_dummy(request.password)
            raise InvalidCredentialsError("Login failed: unknown email")

        if not await self.password_hasher.verify(request.password, user.password_hash):
            raise InvalidCredentialsError("Login failed: password mismatch")

        return UserResponse.from_user(user)
