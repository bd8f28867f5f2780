# models/connection_request.py
import enum

from sqlalchemy import Column, BigInteger, DateTime, String, ForeignKey, UniqueConstraint, CheckConstraint, Index
from sqlalchemy.sql import func

from .base import Base


class RequestStatus(str, enum.Enum):
    interested = "interested"
    ignored = "ignored"
    accepted = "accepted"
    rejected = "rejected"


# What the sender may create and what the receiver may decide
SENDER_INTENTS = (RequestStatus.interested, RequestStatus.ignored)
REVIEW_DECISIONS = (RequestStatus.accepted, RequestStatus.rejected)


class ConnectionRequest(Base):
    __tablename__ = "connection_requests"

    id = Column(BigInteger, primary_key=True, index=True)
    from_user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    to_user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    status = Column(String(16), nullable=False)

    # Sorted participant ids, one row per unordered pair
    pair_low = Column(BigInteger, nullable=False)
    pair_high = Column(BigInteger, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("pair_low", "pair_high", name="uq_connection_requests_pair"),
        CheckConstraint("from_user_id <> to_user_id", name="ck_connection_requests_not_self"),
        CheckConstraint(
            "status IN ('interested', 'ignored', 'accepted', 'rejected')",
            name="ck_connection_requests_status",
        ),
        Index("ix_connection_requests_to_status", "to_user_id", "status"),
        Index("ix_connection_requests_from", "from_user_id"),
    )

    @classmethod
    def between(cls, from_user_id: int, to_user_id: int, status: RequestStatus) -> "ConnectionRequest":
        low, high = sorted([from_user_id, to_user_id])
        return cls(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            status=status.value,
            pair_low=low,
            pair_high=high,
        )

    def __repr__(self):
        return f"<ConnectionRequest {self.from_user_id}→{self.to_user_id} {self.status}>"
