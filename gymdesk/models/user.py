from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
import uuid
from gymdesk.db.database import Base
from gymdesk.db.types import GUID


class User(Base):
    """Login identity. Page access is decided by the matching Profile."""

    __tablename__ = "users"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
