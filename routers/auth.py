# routers/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.database import get_db
from core.security import create_access_token
from models.user import User
from schemas.auth import LoginRequest, MessageResponse, TokenResponse
from schemas.user import SignupRequest
from services import accounts
from utils.user_helpers import to_user_read

router = APIRouter(tags=["Auth"])


def _issue_token(user: User, response: Response) -> TokenResponse:
    access_token, expires = create_access_token(user.id)
    response.set_cookie(
        key="token",
        value=access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in_ms=int(expires.timestamp() * 1000),
        user=to_user_read(user),
    )


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account and get a JWT",
)
async def signup(
    payload: SignupRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    user = await accounts.register_user(db, payload)
    return _issue_token(user, response)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
)
async def login(
    payload: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    user = await accounts.authenticate(db, payload.email, payload.password)
    return _issue_token(user, response)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Drop the session cookie",
)
async def logout(response: Response):
    response.delete_cookie("token")
    return MessageResponse(message="Logged out")
