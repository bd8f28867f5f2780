from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from core.security import get_current_user
from models.user import User
from schemas.user import UserSummary
from services.feed import get_feed
from utils.user_helpers import to_user_summaries

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get(
    "",
    response_model=List[UserSummary],
    summary="Get the feed of candidates"
)
async def read_feed(
    # Raw strings: bad values are clamped, not rejected
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Page size, capped at FEED_MAX_LIMIT"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[UserSummary]:
    users = await get_feed(db, current_user, page, limit)
    return to_user_summaries(users)
