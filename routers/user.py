from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from core.security import get_current_user
from models.user import User
from schemas.connection import ReceivedRequestRead, SentRequestRead
from schemas.user import UserSummary
from services import connections
from utils.user_helpers import to_user_summary, to_user_summaries

router = APIRouter(prefix="/user", tags=["users"])


@router.get(
    "/request/received",
    response_model=List[ReceivedRequestRead],
    summary="Requests waiting for your review"
)
async def received_requests(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[ReceivedRequestRead]:
    rows = await connections.list_received_requests(db, current_user)
    return [
        ReceivedRequestRead(
            id=request.id,
            status=request.status,
            created_at=request.created_at,
            from_user=to_user_summary(sender),
        )
        for request, sender in rows
    ]


@router.get(
    "/request/sent",
    response_model=List[SentRequestRead],
    summary="Your requests still waiting for review"
)
async def sent_requests(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[SentRequestRead]:
    rows = await connections.list_sent_requests(db, current_user)
    return [
        SentRequestRead(
            id=request.id,
            status=request.status,
            created_at=request.created_at,
            to_user=to_user_summary(receiver),
        )
        for request, receiver in rows
    ]


@router.get(
    "/connection/accepted",
    response_model=List[UserSummary],
    summary="Users you are connected with"
)
async def accepted_connections(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[UserSummary]:
    users = await connections.list_connections(db, current_user)
    return to_user_summaries(users)
