import re
from typing import Optional, List, Literal
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from models.user import MIN_AGE, MAX_AGE

MAX_SKILLS = 20
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_password_strength(value: str) -> str:
    if len(value) < 8:
        raise ValueError("must be at least 8 characters long")
    if not re.search(r"[A-Za-z]", value) or not re.search(r"\d", value):
        raise ValueError("must contain at least one letter and one digit")
    return value


class UserSummary(BaseModel):
    """Public part of a profile, shown in the feed, requests and connections."""
    user_id: int = Field(..., description="PK in the database")
    first_name: str = Field(..., max_length=100)
    last_name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    about: Optional[str] = None
    skills: List[str] = Field([], description="List of skills")
    photo_url: Optional[str] = None

    class Config:
        from_attributes = True


class UserRead(UserSummary):
    email: str
    is_premium: bool = False
    membership_type: Optional[str] = None
    created_at: datetime = Field(..., description="Account creation time")


class SignupRequest(BaseModel):
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)
    first_name: str = Field(..., max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not EMAIL_RE.match(value):
            raise ValueError("is not a valid email address")
        return value

    @field_validator("password")
    @classmethod
    def strong_password(cls, value: str) -> str:
        return check_password_strength(value)

    @field_validator("first_name")
    @classmethod
    def required_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class ProfileUpdate(BaseModel):
    """Partial profile edit. Only the listed fields may be sent."""
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    gender: Optional[Literal["male", "female", "other"]] = None
    about: Optional[str] = Field(None, max_length=2000)
    skills: Optional[List[str]] = Field(None, max_length=MAX_SKILLS)
    photo_url: Optional[str] = Field(None, max_length=2048)

    class Config:
        extra = "forbid"

    @field_validator("first_name")
    @classmethod
    def required_name(cls, value: Optional[str]) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, value: Optional[List[str]]) -> List[str]:
        cleaned: List[str] = []
        for skill in value or []:
            skill = skill.strip()
            if skill and skill not in cleaned:
                cleaned.append(skill)
        return cleaned


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., max_length=128)

    @field_validator("new_password")
    @classmethod
    def strong_password(cls, value: str) -> str:
        return check_password_strength(value)


class PremiumStatus(BaseModel):
    is_premium: bool
    membership_type: Optional[str] = None
