"""Bearer-token identity resolution.

Credentials are owned by an external identity provider; this module only
verifies the token it issued and resolves the caller's role.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import firebase_admin
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials as firebase_credentials
from firebase_admin import exceptions as firebase_exceptions
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from groundbooking.core.catalog import UserRole, coerce_enum
from groundbooking.core.config import settings
from groundbooking.dependencies import get_db
from groundbooking.repository import user_repository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    uid: str
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _get_firebase_app() -> firebase_admin.App:
    if not firebase_admin._apps:  # type: ignore[attr-defined]
        if settings.FIREBASE_CREDENTIALS_PATH:
            cred = firebase_credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
        else:
            cred = firebase_credentials.ApplicationDefault()

        options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else {}
        firebase_admin.initialize_app(cred, options)

    return firebase_admin.get_app()


def _decode_firebase_token(token: str) -> Dict[str, Any]:
    try:
        claims = firebase_auth.verify_id_token(token, app=_get_firebase_app())
    except (ValueError, firebase_exceptions.FirebaseError) as exc:
        logger.info("Rejected Firebase ID token: %s", exc)
        raise _credentials_error() from exc
    return {"sub": claims.get("uid") or claims.get("sub"), **claims}


def _decode_jwt(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise _credentials_error() from exc


def decode_token(token: str) -> Dict[str, Any]:
    if settings.AUTH_PROVIDER == "firebase":
        return _decode_firebase_token(token)
    return _decode_jwt(token)


def _resolve_role(db: Session, uid: str, claims: Dict[str, Any]) -> UserRole:
    role = coerce_enum(UserRole, claims.get("role"))
    if role is not None:
        return role

    profile = user_repository.get_user(db, uid)
    if profile is not None:
        return coerce_enum(UserRole, profile.role) or UserRole.USER
    return UserRole.USER


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Identity:
    """Return the authenticated caller or raise 401."""

    if credentials is None or not credentials.scheme or credentials.scheme.lower() != "bearer":
        raise _credentials_error("Not authenticated")

    claims = decode_token(credentials.credentials)
    uid = claims.get("sub")
    email = claims.get("email")
    if not uid or not email:
        raise _credentials_error()

    return Identity(uid=str(uid), email=str(email), role=_resolve_role(db, str(uid), claims))


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator privileges required",
        )
    return identity


__all__ = ["Identity", "decode_token", "get_current_identity", "require_admin"]
