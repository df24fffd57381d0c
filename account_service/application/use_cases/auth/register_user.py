# Standard library imports
import logging

# Local application imports
from ....core.exceptions import DuplicateKeyError
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.password_hasher import PasswordHasher
from ....domain.models.user import (
    User,
    validate_email,
    validate_password,
    validate_phone,
    validate_profession,
    validate_username,
)
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If a field breaks the account rules
            DuplicateKeyError: If the email or phone is already registered
        """
        username = validate_username(request.username)
        email = validate_email(request.email)
        password = validate_password(request.password)
        phone = validate_phone(request.phone)
        profession = validate_profession(request.profession)

        # Best-effort pre-check; the unique indexes are the real guard
        existing_user = await self.user_repository.find_by_email_or_phone(email, phone)
        if existing_user is not None:
            raise DuplicateKeyError(f"Registration clash for {email[:3]}***")

        hashed_password = await self.password_hasher.hash(password)

        new_user = User(
            id=None,  # Will be set by repository
            username=username,
            email=email,
            password_hash=hashed_password,
            phone=phone,
            profession=profession,
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info("Registered user %s", saved_user.id)

        return UserResponse.from_user(saved_user)
