import logging
from dataclasses import dataclass

from taskmanager.models import User
from taskmanager.schemas.user import MIN_PASSWORD_LENGTH
from taskmanager.services.tokens import TokenService
from taskmanager.stores import DuplicateEmail, UserStore
from taskmanager.utils.auth import hash_password, verify_password
from taskmanager.utils.errors import AuthenticationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class AuthResult:
    token: str
    user: User


class AuthService:
    """Registration and login on top of the user store and token service."""

    def __init__(self, users: UserStore, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    def register(self, email: str, password: str) -> AuthResult:
        if not email or not password:
            raise ValidationError("Email and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        if self.users.get_by_email(email) is not None:
            raise ValidationError("Email already registered")

        try:
            hashed = hash_password(password)
        except ValueError as e:
            raise ValidationError(str(e)) from None

        try:
            user = self.users.create(email, hashed)
        except DuplicateEmail:
            raise ValidationError("Email already registered") from None

        logger.info("registered user %s", user.id)
        return AuthResult(token=self.tokens.issue(user.id, user.email), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        if not email or not password:
            raise ValidationError("Email and password are required")

        # same message for unknown email and wrong password
        user = self.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return AuthResult(token=self.tokens.issue(user.id, user.email), user=user)

    def get_user_by_id(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User")
        return user
