"""
Landing page.
"""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from gymdesk.core.config import settings
from gymdesk.db.database import get_db
from gymdesk.models.user import User
from gymdesk.services.profile_service import ProfileService
from gymdesk.utils.auth import get_optional_user_id, landing_path_for

router = APIRouter()


@router.get("/")
async def home(
    user_id: Optional[UUID] = Depends(get_optional_user_id),
    db: Session = Depends(get_db),
):
    """
    Landing page for visitors; signed-in users go to their dashboard.
    """
    if user_id is None:
        return {
            "message": f"{settings.app_name} gym management",
            "login_url": "/auth/login",
            "signup_url": "/auth/signup",
        }

    user = db.query(User).filter(User.id == user_id).first()
    profile = ProfileService(db).ensure_profile(user)
    return RedirectResponse(
        url=landing_path_for(profile), status_code=status.HTTP_303_SEE_OTHER
    )
