from typing import Optional

from pydantic import BaseModel, Field, field_validator

from groundbooking.core.catalog import UserRole


class UserProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, pattern=r"^\d{10}$")

    @field_validator("name")
    def strip_name(cls, name: Optional[str]) -> Optional[str]:
        if name is None:
            return None
        return name.strip() or None


class UserProfileResponse(BaseModel):
    uid: str
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
