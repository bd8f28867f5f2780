from pydantic import BaseModel
from typing import Literal

from schemas.user import UserRead


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    """
    Response on successful signup or login.
    """
    access_token: str
    token_type: Literal["bearer"]
    expires_in_ms: int
    user: UserRead


class MessageResponse(BaseModel):
    message: str
