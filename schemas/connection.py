from datetime import datetime

from pydantic import BaseModel

from schemas.user import UserSummary


class ConnectionRequestRead(BaseModel):
    id: int
    from_user_id: int
    to_user_id: int
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ReceivedRequestRead(BaseModel):
    """A pending request together with the sender's profile."""
    id: int
    status: str
    created_at: datetime
    from_user: UserSummary


class SentRequestRead(BaseModel):
    id: int
    status: str
    created_at: datetime
    to_user: UserSummary
