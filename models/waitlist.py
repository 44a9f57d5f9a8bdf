"""
Waitlist signup model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from core.database import Base


class WaitlistSignup(Base):
    __tablename__ = "waitlist_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # No length limit on submitted values
    name = Column(Text, nullable=False)
    # Not unique: repeated signups are stored as separate rows
    email = Column(Text, nullable=False, index=True)
    ip_address = Column(String(64), nullable=False, default="unknown")
    project_name = Column(String(128), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
