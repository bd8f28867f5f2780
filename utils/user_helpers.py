"""Helpers turning user models into Pydantic schemas."""
from collections.abc import Iterable
from typing import List

from models.user import User
from schemas.user import UserRead, UserSummary


def to_user_summary(user: User) -> UserSummary:
    """Convert a user model to its public UserSummary."""
    return UserSummary(
        user_id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        age=user.age,
        gender=user.gender,
        about=user.about,
        skills=list(user.skills or []),
        photo_url=user.photo_url,
    )


def to_user_summaries(users: Iterable[User]) -> List[UserSummary]:
    return [to_user_summary(user) for user in users]


def to_user_read(user: User) -> UserRead:
    """Convert a user model to UserRead, including the private fields."""
    return UserRead(
        **to_user_summary(user).model_dump(),
        email=user.email,
        is_premium=user.is_premium,
        membership_type=user.membership_type,
        created_at=user.created_at,
    )
