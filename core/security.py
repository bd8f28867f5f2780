# core/security.py
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from fastapi import Cookie, Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.database import get_db
from core.exceptions import Unauthenticated
from models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

PASSWORD_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, salt: Optional[str] = None, iterations: Optional[int] = None) -> str:
    """
    Hashes a password as ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``.
    The iteration count travels with the hash so it can be raised later
    without invalidating stored passwords.
    """
    salt = salt or secrets.token_hex(16)
    iterations = iterations or settings.PASSWORD_HASH_ITERATIONS
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
    ).hex()
    return f"{PASSWORD_ALGORITHM}${iterations}${salt}${digest}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        algorithm, iterations, salt, expected = password_hash.split("$", 3)
    except ValueError:
        return False
    if algorithm != PASSWORD_ALGORITHM or not iterations.isdigit():
        return False
    candidate = hash_password(password, salt=salt, iterations=int(iterations))
    return hmac.compare_digest(candidate, password_hash)


def create_access_token(user_id: int) -> Tuple[str, datetime]:
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token_payload = {
        "user_id": user_id,
        "exp": expires,
    }
    access_token = jwt.encode(
        token_payload,
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
    return access_token, expires


def decode_access_token(token: str) -> int:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise Unauthenticated(headers={"WWW-Authenticate": "Bearer"})
    user_id = payload.get("user_id")
    if not isinstance(user_id, int):
        raise Unauthenticated(headers={"WWW-Authenticate": "Bearer"})
    return user_id


async def get_current_user(
    bearer: Optional[str] = Depends(oauth2_scheme),
    token: Optional[str] = Cookie(None),
    db: AsyncSession = Depends(get_db),
) -> User:
    # Bearer header wins over the session cookie
    raw_token = bearer or token
    if not raw_token:
        raise Unauthenticated("Please login", headers={"WWW-Authenticate": "Bearer"})

    user_id = decode_access_token(raw_token)
    user = await db.get(User, user_id)
    if not user:
        raise Unauthenticated("User not found", headers={"WWW-Authenticate": "Bearer"})
    return user
