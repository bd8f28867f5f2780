from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from core.security import get_current_user
from models.user import User
from schemas.auth import MessageResponse
from schemas.user import UserRead, ProfileUpdate, PasswordChange
from services import accounts
from utils.user_helpers import to_user_read

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "/view",
    response_model=UserRead,
    summary="Get your own profile"
)
async def view_profile(
    current_user: User = Depends(get_current_user),
):
    return to_user_read(current_user)


@router.patch(
    "/edit",
    response_model=UserRead,
    summary="Update your profile"
)
async def edit_profile(
    payload: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    user = await accounts.update_profile(db, current_user, payload)
    return to_user_read(user)


@router.patch(
    "/password",
    response_model=MessageResponse,
    summary="Change your password"
)
async def edit_password(
    payload: PasswordChange,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await accounts.change_password(db, current_user, payload)
    return MessageResponse(message="Password updated")
