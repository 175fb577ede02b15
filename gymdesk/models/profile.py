from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from gymdesk.db.database import Base
from gymdesk.db.types import GUID


class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the users row it describes
    id = Column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    full_name = Column(String, nullable=True)
    email = Column(String, nullable=True, index=True)
    role = Column(String, nullable=False, default="customer", index=True)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
