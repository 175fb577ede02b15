"""
Authentication utilities: identity resolution and role gates.

Every page resolves the caller and re-reads the profile role on each
request. Failures redirect instead of returning 401/403 so browsers land on
the right page.
"""

from typing import Optional
from uuid import UUID
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from gymdesk.core.errors import PageRedirect
from gymdesk.db.database import get_db
from gymdesk.domain.enums import Role
from gymdesk.models.profile import Profile
from gymdesk.models.user import User
from gymdesk.utils.jwt import decode_access_token

LOGIN_PATH = "/auth/login"
DASHBOARD_PATH = "/dashboard"
ADMIN_PATH = "/admin"

security_optional = HTTPBearer(auto_error=False)


def get_optional_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
    db: Session = Depends(get_db),
) -> Optional[UUID]:
    """
    Extract user_id from JWT token if present, otherwise return None.

    Tokens for users that no longer exist are treated as absent.

    Args:
        credentials: HTTP Bearer token from Authorization header (optional)
        db: Database session

    Returns:
        user_id (UUID) if token is valid, None otherwise
    """
    if credentials is None:
        return None

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        return None

    return user_id


def get_current_user_id(
    user_id: Optional[UUID] = Depends(get_optional_user_id),
) -> UUID:
    """
    Resolve the authenticated user or redirect to the login page.

    Raises:
        PageRedirect: If token is invalid or missing
    """
    if user_id is None:
        raise PageRedirect(LOGIN_PATH)
    return user_id


def get_current_profile(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Optional[Profile]:
    """Fetch the caller's profile. May be None for inconsistent accounts."""
    return db.query(Profile).filter(Profile.id == user_id).first()


def require_admin(
    profile: Optional[Profile] = Depends(get_current_profile),
) -> Profile:
    """
    Gate for every /admin page.

    Raises:
        PageRedirect: To the member dashboard when the caller is not an admin
    """
    if profile is None or profile.role != Role.ADMIN.value:
        raise PageRedirect(DASHBOARD_PATH)
    return profile


def landing_path_for(profile: Optional[Profile]) -> str:
    """Where a freshly authenticated caller should go."""
    if profile is not None and profile.role == Role.ADMIN.value:
        return ADMIN_PATH
    return DASHBOARD_PATH
