from __future__ import annotations

from typing import Dict, Optional

from sqlalchemy.orm import Session

from groundbooking.models.user_profile import UserProfile
from groundbooking.repository.booking_repository import commit_or_raise


def get_user(db: Session, uid: str) -> Optional[UserProfile]:
    return db.query(UserProfile).filter(UserProfile.uid == uid).first()


def upsert_user(db: Session, uid: str, profile_data: Dict[str, object]) -> UserProfile:
    profile = get_user(db, uid)
    if profile is None:
        profile = UserProfile(uid=uid, **profile_data)
        db.add(profile)
    else:
        for attribute, value in profile_data.items():
            setattr(profile, attribute, value)

    commit_or_raise(db)
    db.refresh(profile)
    return profile
