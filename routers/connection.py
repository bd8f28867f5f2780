from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from core.security import get_current_user
from models.user import User
from schemas.connection import ConnectionRequestRead
from services import connections

router = APIRouter(prefix="/connection", tags=["connections"])


@router.post(
    "/request/{intent}/{to_user_id}",
    response_model=ConnectionRequestRead,
    status_code=status.HTTP_201_CREATED,
    summary="Send 'interested' or 'ignored' to a user from the feed"
)
async def send_request(
    intent: str,
    to_user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    request = await connections.create_request(db, current_user, to_user_id, intent)
    return ConnectionRequestRead.model_validate(request)


@router.post(
    "/review/{decision}/{request_id}",
    response_model=ConnectionRequestRead,
    summary="Accept or reject a received request"
)
async def review_request(
    decision: str,
    request_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    request = await connections.review_request(db, request_id, current_user, decision)
    return ConnectionRequestRead.model_validate(request)
