"""Feed of candidate profiles for a viewer.

A candidate is any user other than the viewer with whom the viewer shares no
connection request, in either direction and in any status. Once two users have
interacted they never see each other in the feed again.
"""
from typing import List, Optional, Tuple, Union

from sqlalchemy import select, not_
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.id_generator import MAX_ID
from models.connection_request import ConnectionRequest
from models.user import User

PageParam = Union[int, str, None]


def _as_int(value: PageParam) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_pagination(page: PageParam, limit: PageParam) -> Tuple[int, int]:
    """Clamp raw page/limit values instead of rejecting them."""
    page_num = _as_int(page)
    size = _as_int(limit)

    if page_num is None or page_num < 1:
        page_num = 1
    if size is None or size < 1:
        size = settings.FEED_DEFAULT_LIMIT
    size = min(size, settings.FEED_MAX_LIMIT)
    # keep the offset inside BIGINT
    page_num = min(page_num, MAX_ID // size)
    return page_num, size


def interacted_user_ids(viewer_id: int):
    """Subqueries of user ids sharing any request with the viewer."""
    sent = select(ConnectionRequest.to_user_id).where(ConnectionRequest.from_user_id == viewer_id)
    received = select(ConnectionRequest.from_user_id).where(ConnectionRequest.to_user_id == viewer_id)
    return sent, received


async def get_feed(
    db: AsyncSession,
    viewer: User,
    page: PageParam = None,
    limit: PageParam = None,
) -> List[User]:
    page_num, size = normalize_pagination(page, limit)
    sent, received = interacted_user_ids(viewer.id)

    stmt = (
        select(User)
        .where(
            User.id != viewer.id,
            not_(User.id.in_(sent)),
            not_(User.id.in_(received)),
        )
        .order_by(User.created_at, User.id)
        .offset((page_num - 1) * size)
        .limit(size)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())
