from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from taskmanager.database import get_db
from taskmanager.services.auth import AuthService
from taskmanager.services.tokens import TokenClaims, TokenService
from taskmanager.stores import TaskStore, UserStore
from taskmanager.utils.errors import AuthenticationError


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def _extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return None


def get_current_user(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    tok = _extract_token(authorization)
    if not tok:
        raise AuthenticationError("Missing or invalid authorization header")
    return tokens.verify(tok)


def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(UserStore(db), tokens)


def get_task_store(db: Session = Depends(get_db)) -> TaskStore:
    return TaskStore(db)
