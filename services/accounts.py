import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import is_unique_violation
from core.exceptions import DuplicateEmail, InvalidCredentials
from core.security import hash_password, verify_password
from models.user import User
from schemas.user import SignupRequest, ProfileUpdate, PasswordChange

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str):
    res = await db.execute(select(User).where(User.email == email.strip().lower()))
    return res.scalar_one_or_none()


async def register_user(db: AsyncSession, payload: SignupRequest) -> User:
    if await get_user_by_email(db, payload.email):
        raise DuplicateEmail()

    user = User(
        email=payload.email,
        password_hash=hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        skills=[],
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        if not is_unique_violation(exc, "ix_users_email", "users.email"):
            raise
        raise DuplicateEmail()
    await db.refresh(user)

    logger.info("User %s registered", user.id)
    return user


async def authenticate(db: AsyncSession, email: str, password: str) -> User:
    user = await get_user_by_email(db, email)
    # Same error for unknown email and wrong password
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    return user


async def update_profile(db: AsyncSession, user: User, payload: ProfileUpdate) -> User:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(user, field, value)

    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def change_password(db: AsyncSession, user: User, payload: PasswordChange) -> User:
    if not verify_password(payload.current_password, user.password_hash):
        raise InvalidCredentials("Current password is incorrect")

    user.password_hash = hash_password(payload.new_password)
    db.add(user)
    await db.commit()
    logger.info("User %s changed password", user.id)
    return user
