import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Callable, Optional

from jose import jwt, JWTError

from taskmanager.config import Settings
from taskmanager.utils.errors import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    email: str


class TokenService:
    """Issue and verify signed, time-limited identity tokens.

    The token carries ``userId`` and ``email`` plus an ``exp`` claim. Any
    verification failure (bad signature, malformed, expired) surfaces as the
    same ``InvalidTokenError`` so callers cannot tell them apart.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(days=7),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self._clock = clock or (lambda: datetime.now(UTC))

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(self, user_id: int, email: str) -> str:
        now = self._clock()
        payload = {
            "userId": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            # JWT spec uses Unix timestamp
            "exp": int((now + self.expires_delta).timestamp()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            # expiry is checked below against the service clock
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.info("token rejected: %s", type(e).__name__)
            raise InvalidTokenError() from None

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            logger.info("token rejected: missing exp")
            raise InvalidTokenError()
        if self._clock().timestamp() >= exp:
            logger.info("token rejected: expired")
            raise InvalidTokenError()

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            logger.info("token rejected: missing identity claims")
            raise InvalidTokenError()
        return TokenClaims(user_id=user_id, email=email)
