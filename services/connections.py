"""Connection request lifecycle.

    interested --(receiver)--> accepted | rejected
    ignored    (final, never reviewable)

A pair of users holds at most one request, whatever its direction. The unique
``(pair_low, pair_high)`` constraint enforces this under concurrent inserts;
reviews are a single UPDATE guarded by ``status = 'interested'``.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import select, update, or_, case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import is_unique_violation
from core.exceptions import (
    DuplicateRequest,
    InvalidInput,
    InvalidState,
    InvalidTarget,
    NotFound,
    Unauthorized,
)
from core.id_generator import is_storable_id
from models.connection_request import (
    ConnectionRequest,
    RequestStatus,
    REVIEW_DECISIONS,
    SENDER_INTENTS,
)
from models.user import User

logger = logging.getLogger(__name__)


def _parse_status(value: str, allowed: Tuple[RequestStatus, ...], what: str) -> RequestStatus:
    for candidate in allowed:
        if candidate.value == value:
            return candidate
    options = ", ".join(s.value for s in allowed)
    raise InvalidInput(f"Invalid {what} '{value}', expected one of: {options}")


async def find_between(db: AsyncSession, user_a: int, user_b: int) -> Optional[ConnectionRequest]:
    low, high = sorted([user_a, user_b])
    res = await db.execute(
        select(ConnectionRequest).where(
            ConnectionRequest.pair_low == low,
            ConnectionRequest.pair_high == high,
        )
    )
    return res.scalar_one_or_none()


async def create_request(
    db: AsyncSession,
    from_user: User,
    to_user_id: int,
    intent: str,
) -> ConnectionRequest:
    status = _parse_status(intent, SENDER_INTENTS, "intent")
    from_id = from_user.id

    if to_user_id == from_id:
        raise InvalidTarget("You cannot send a request to yourself")

    to_user = await db.get(User, to_user_id) if is_storable_id(to_user_id) else None
    if not to_user:
        raise InvalidTarget("Target user does not exist")

    if await find_between(db, from_id, to_user_id):
        raise DuplicateRequest()

    request = ConnectionRequest.between(from_id, to_user_id, status)
    db.add(request)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        if not is_unique_violation(
            exc, "uq_connection_requests_pair", "connection_requests.pair_low", "connection_requests.pair_high"
        ):
            raise
        # Lost the race against a concurrent request for the same pair
        logger.info("Duplicate request %s→%s rejected by the store", from_id, to_user_id)
        raise DuplicateRequest()
    await db.refresh(request)

    logger.info("Request %s created: %s→%s %s", request.id, from_id, to_user_id, status.value)
    return request


async def review_request(
    db: AsyncSession,
    request_id: int,
    reviewer: User,
    decision: str,
) -> ConnectionRequest:
    status = _parse_status(decision, REVIEW_DECISIONS, "decision")
    if not is_storable_id(request_id):
        raise NotFound("Connection request not found")

    res = await db.execute(
        update(ConnectionRequest)
        .where(
            ConnectionRequest.id == request_id,
            ConnectionRequest.to_user_id == reviewer.id,
            ConnectionRequest.status == RequestStatus.interested.value,
        )
        .values(status=status.value)
        .execution_options(synchronize_session=False)
    )
    await db.commit()

    request = await db.get(ConnectionRequest, request_id, populate_existing=True)
    if res.rowcount == 1:
        logger.info("Request %s %s by %s", request_id, status.value, reviewer.id)
        return request

    # Nothing updated: find out why
    if not request:
        raise NotFound("Connection request not found")
    if request.to_user_id != reviewer.id:
        logger.warning("User %s tried to review request %s addressed to %s", reviewer.id, request_id, request.to_user_id)
        raise Unauthorized("Only the receiver can review this request")
    raise InvalidState(f"Request is '{request.status}' and can no longer be reviewed")


async def list_received_requests(db: AsyncSession, user: User) -> List[Tuple[ConnectionRequest, User]]:
    """Pending requests addressed to the user, newest first, with their senders."""
    res = await db.execute(
        select(ConnectionRequest, User)
        .join(User, User.id == ConnectionRequest.from_user_id)
        .where(
            ConnectionRequest.to_user_id == user.id,
            ConnectionRequest.status == RequestStatus.interested.value,
        )
        .order_by(ConnectionRequest.created_at.desc(), ConnectionRequest.id)
    )
    return [(request, sender) for request, sender in res.all()]


async def list_sent_requests(db: AsyncSession, user: User) -> List[Tuple[ConnectionRequest, User]]:
    """Requests the user sent with interest that are still awaiting review."""
    res = await db.execute(
        select(ConnectionRequest, User)
        .join(User, User.id == ConnectionRequest.to_user_id)
        .where(
            ConnectionRequest.from_user_id == user.id,
            ConnectionRequest.status == RequestStatus.interested.value,
        )
        .order_by(ConnectionRequest.created_at.desc(), ConnectionRequest.id)
    )
    return [(request, receiver) for request, receiver in res.all()]


async def list_connections(db: AsyncSession, user: User) -> List[User]:
    """Accepted requests seen from either side, projected to the other participant."""
    other_id = case(
        (ConnectionRequest.from_user_id == user.id, ConnectionRequest.to_user_id),
        else_=ConnectionRequest.from_user_id,
    )
    res = await db.execute(
        select(User)
        .join(ConnectionRequest, User.id == other_id)
        .where(
            ConnectionRequest.status == RequestStatus.accepted.value,
            or_(
                ConnectionRequest.from_user_id == user.id,
                ConnectionRequest.to_user_id == user.id,
            ),
        )
        .order_by(ConnectionRequest.updated_at.desc(), User.id)
    )
    return list(res.scalars().all())
