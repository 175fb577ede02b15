from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
import uuid
from gymdesk.db.database import Base
from gymdesk.db.types import GUID, StringList


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    muscle_groups = Column(StringList(), nullable=False, default=list)
    equipment = Column(String, nullable=True)
    difficulty_level = Column(String, nullable=False)  # beginner, intermediate, advanced
    instructions = Column(Text, nullable=True)
    media_url = Column(String, nullable=True)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
