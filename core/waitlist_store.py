"""
Persistence port for waitlist entries.

Routes depend on `get_waitlist_store`, never on SQLAlchemy directly, so the
backing store can be swapped with `app.dependency_overrides`.
"""
from datetime import datetime
from typing import Optional, Protocol

from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.config import logger
from core.database import get_db
from models.waitlist import WaitlistSignup


class WaitlistEntry(BaseModel):
    name: str
    email: str
    ip_address: str = "unknown"
    project_name: str


class StoredEntry(WaitlistEntry):
    id: Optional[int] = None
    created_at: Optional[datetime] = None


class WaitlistStore(Protocol):
    def create(self, entry: WaitlistEntry) -> StoredEntry:
        """Persist one entry and return it as stored. Raises on failure."""
        ...


class SqlWaitlistStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, entry: WaitlistEntry) -> StoredEntry:
        rec = WaitlistSignup(
            name=entry.name,
            email=entry.email,
            ip_address=entry.ip_address,
            project_name=entry.project_name,
        )
        try:
            self.db.add(rec)
            self.db.commit()
            self.db.refresh(rec)
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"[waitlist] Stored entry id={rec.id} project={rec.project_name}")
        return StoredEntry.model_validate(rec, from_attributes=True)


def get_waitlist_store(db: Session = Depends(get_db)) -> WaitlistStore:
    return SqlWaitlistStore(db)
