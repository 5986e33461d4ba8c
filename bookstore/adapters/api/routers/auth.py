# bookstore/adapters/api/routers/auth.py
from fastapi import APIRouter, Depends, status

from bookstore.adapters.api.dependencies import get_authenticate, get_current_user
from bookstore.adapters.api.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisteredUser,
    RegisterRequest,
    TokenResponse,
)
from bookstore.adapters.api.schemas.common import Envelope
from bookstore.core.domain.models import AuthenticatedUser
from bookstore.core.use_cases import Authenticate

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=Envelope[RegisteredUser],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(
    payload: RegisterRequest,
    use_case: Authenticate = Depends(get_authenticate),
):
    user = use_case.register(payload.email, payload.password, payload.username)
    return Envelope(message="User registered successfully", data=RegisteredUser.model_validate(user))


@router.post("/login", response_model=TokenResponse, summary="Exchange credentials for a bearer token")
def login(
    payload: LoginRequest,
    use_case: Authenticate = Depends(get_authenticate),
):
    return TokenResponse(access_token=use_case.login(payload.email, payload.password))


@router.get("/me", response_model=Envelope[CurrentUser], summary="Current user")
def me(
    current: AuthenticatedUser = Depends(get_current_user),
    use_case: Authenticate = Depends(get_authenticate),
):
    user = use_case.me(current.id)
    return Envelope(message="Get me successfully", data=CurrentUser.model_validate(user))
