from fastapi import APIRouter, Depends

from taskmanager.routers.deps import get_auth_service, get_current_user
from taskmanager.schemas.user import UserCreate, UserLogin, UserOut
from taskmanager.services.auth import AuthResult, AuthService
from taskmanager.services.tokens import TokenClaims

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_view(user) -> dict:
    return UserOut.model_validate(user).model_dump(by_alias=True, mode="json")


def _auth_payload(result: AuthResult) -> dict:
    return {"token": result.token, "user": _user_view(result.user)}


@router.post("/register", status_code=201)
def register(user: UserCreate, auth: AuthService = Depends(get_auth_service)):
    result = auth.register(user.email, user.password)
    return {"success": True, "message": "User registered successfully", "data": _auth_payload(result)}


@router.post("/login")
def login(user: UserLogin, auth: AuthService = Depends(get_auth_service)):
    result = auth.login(user.email, user.password)
    return {"success": True, "message": "Login successful", "data": _auth_payload(result)}


@router.get("/me")
def me(current: TokenClaims = Depends(get_current_user), auth: AuthService = Depends(get_auth_service)):
    user = auth.get_user_by_id(current.user_id)
    return {"success": True, "message": "User fetched successfully", "data": {"user": _user_view(user)}}
