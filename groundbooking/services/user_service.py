from sqlalchemy.orm import Session

from groundbooking.core.security import Identity
from groundbooking.repository import user_repository
from groundbooking.schemas.user import UserProfileResponse, UserProfileUpdate


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, identity: Identity) -> UserProfileResponse:
        profile = user_repository.get_user(self.db, identity.uid)
        return UserProfileResponse(
            uid=identity.uid,
            email=identity.email,
            name=profile.name if profile is not None else None,
            phone=profile.phone if profile is not None else None,
            role=identity.role,
        )

    def update_profile(
        self, identity: Identity, payload: UserProfileUpdate
    ) -> UserProfileResponse:
        """Store contact details used to prefill booking forms.

        The role is never taken from the request; new profiles start as ``user``.
        """

        profile_data = payload.model_dump(exclude_unset=True)
        profile_data["email"] = identity.email
        user_repository.upsert_user(self.db, identity.uid, profile_data)
        return self.get_profile(identity)
