"""
Authentication pages: signup, login and sign-out.
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, EmailStr, Field, field_validator
from sqlalchemy.orm import Session

from gymdesk.db.database import get_db
from gymdesk.models.user import User
from gymdesk.services.profile_service import ProfileService
from gymdesk.utils.auth import landing_path_for
from gymdesk.utils.jwt import create_access_token
from gymdesk.utils.password import (
    hash_password,
    password_too_long,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class SignupRequest(BaseModel):
    """Member signup request."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ..., min_length=8, max_length=72, description="Password (8-72 characters)"
    )
    full_name: Optional[str] = Field(None, description="Name shown to gym staff")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(BaseModel):
    """User login request."""

    # Plain str: a malformed email is just an unknown account
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class AuthResponse(BaseModel):
    """Authentication response with token and landing page."""

    user_id: UUID
    token: str
    role: str
    redirect_to: str


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    db: Session = Depends(get_db),
):
    """
    Create a member account.

    New accounts always get the customer role.
    """
    logger.info(f"[SIGNUP] Starting signup for email: {request.email}")

    existing_user = db.query(User).filter(User.email == request.email).first()
    if existing_user:
        logger.warning(f"[SIGNUP] Email already registered: {request.email}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    user = User(
        email=request.email,
        password_hash=hash_password(request.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    profile = ProfileService(db).create_profile(user, full_name=request.full_name)

    return AuthResponse(
        user_id=user.id,
        token=create_access_token(user.id),
        role=profile.role,
        redirect_to=landing_path_for(profile),
    )


@router.post("/login", response_model=AuthResponse, status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Login with email and password.

    Accounts without a profile get a default customer profile.
    """
    user = db.query(User).filter(User.email == request.email).first()
    if not user or not verify_password(request.password, user.password_hash):
        logger.info(f"[LOGIN] Rejected credentials for email: {request.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    profile = ProfileService(db).ensure_profile(user)

    return AuthResponse(
        user_id=user.id,
        token=create_access_token(user.id),
        role=profile.role,
        redirect_to=landing_path_for(profile),
    )


@router.post("/signout")
async def signout():
    """Sign out. Tokens are stateless, so the client simply drops its token."""
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
