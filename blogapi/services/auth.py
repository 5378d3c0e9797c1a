"""Authentication service: signup, signin and token issuance."""

from logging import getLogger

from blogapi.configs import file_logger
from blogapi.errors import ConflictError, InvalidCredentialsError, ValidationError
from blogapi.managers.password_manager import hash_password, verify_password
from blogapi.managers.token_manager import create_access_token
from blogapi.models import UserDB
from blogapi.repositories import UserRepositoryProtocol
from blogapi.schemas.auth import AuthResponse, SigninRequest, SignupRequest
from blogapi.schemas.user import UserPublic

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for handling user registration and authentication."""

    def __init__(self, user_repo: UserRepositoryProtocol) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    def create_token_for_user(self, user: UserDB) -> AuthResponse:
        """
        Issue an access token and pair it with the user's public fields.

        Args:
            user: User entity

        Returns:
            AuthResponse: Token and public user data
        """
        token = create_access_token(user_id=user.id, email=user.email)
        return AuthResponse(token=token, user=UserPublic.model_validate(user))

    async def signup(self, payload: SignupRequest) -> AuthResponse:
        """
        Register a new user.

        Args:
            payload: Signup fields

        Returns:
            AuthResponse: Token and public user data

        Raises:
            ValidationError: If a required field is missing or blank
            ConflictError: If the email is already registered
        """
        first_name, last_name = payload.first_name, payload.last_name
        email, password = payload.email, payload.password
        if not (first_name and last_name and email and password):
            raise ValidationError("Missing required fields")

        if await self.user_repo.get_by_email(email):
            raise ConflictError("Email already registered")

        user = UserDB(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=await hash_password(password),
            bio=payload.bio or None,
        )
        user = await self.user_repo.create(user)
        logger.info(f"User {user.id} registered")
        return self.create_token_for_user(user)

    async def authenticate_user(self, email: str, password: str) -> UserDB:
        """
        Check an email and password pair.

        Unknown emails and wrong passwords fail identically, and both run a
        full hash verification.

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_email(email)
        stored_hash = user.password_hash if user else None
        if not await verify_password(password, stored_hash) or user is None:
            raise InvalidCredentialsError
        return user

    async def signin(self, payload: SigninRequest) -> AuthResponse:
        """
        Authenticate a user and issue a token.

        Args:
            payload: Email and password

        Returns:
            AuthResponse: Token and public user data

        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If authentication fails
        """
        if not payload.email or not payload.password:
            raise ValidationError("Missing email or password")

        user = await self.authenticate_user(payload.email, payload.password)
        logger.info(f"User {user.id} signed in")
        return self.create_token_for_user(user)
