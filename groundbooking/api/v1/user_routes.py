from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from groundbooking.core.security import Identity, get_current_identity
from groundbooking.dependencies import get_db
from groundbooking.schemas.user import UserProfileResponse, UserProfileUpdate
from groundbooking.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserProfileResponse)
def get_my_profile(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> UserProfileResponse:
    return UserService(db).get_profile(identity)


@router.put("/me", response_model=UserProfileResponse)
def update_my_profile(
    payload: UserProfileUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> UserProfileResponse:
    """Save the caller's name and phone number for later bookings."""

    return UserService(db).update_profile(identity, payload)


__all__ = ["router"]
