# Payment processing is not implemented; only the premium status is exposed.
from fastapi import APIRouter, Depends

from core.security import get_current_user
from models.user import User
from schemas.user import PremiumStatus

router = APIRouter(prefix="/premium", tags=["premium"])


@router.get("/verify", response_model=PremiumStatus, summary="Check premium membership")
async def verify_premium(current_user: User = Depends(get_current_user)):
    return PremiumStatus(
        is_premium=current_user.is_premium,
        membership_type=current_user.membership_type,
    )
