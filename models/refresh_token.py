"""
RefreshToken model: stores opaque refresh tokens so they can be checked and revoked.
Fields:
- token (primary key, 64 hex chars)
- user_id (String(36)) - FK to users.id
- expires_at
- revoked_at (null until revoked)
- created_at, updated_at
"""
from __future__ import annotations

from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey
from models.base_model import Base, TimestampMixin, as_utc, utcnow


class RefreshToken(TimestampMixin, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utcnow()) > as_utc(self.expires_at)

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    def __repr__(self):
        return f"<RefreshToken user={self.user_id} expires_at={self.expires_at}>"
