# models/user.py
from sqlalchemy import Column, BigInteger, DateTime, Boolean, String, Text, Integer, JSON, CheckConstraint
from sqlalchemy.sql import func

from .base import Base

MIN_AGE = 18
MAX_AGE = 120
GENDERS = ("male", "female", "other")


class User(Base):
    __tablename__ = "users"

    id = Column(BigInteger, primary_key=True, index=True)
    email = Column(String(254), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(10), nullable=True)
    about = Column(Text, nullable=True)
    skills = Column(JSON, default=list, nullable=False)
    photo_url = Column(String(2048), nullable=True)

    is_premium = Column(Boolean, default=False, nullable=False)
    membership_type = Column(String(16), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(f"age IS NULL OR age >= {MIN_AGE}", name="ck_users_adult"),
    )

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"
