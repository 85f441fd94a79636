from sqlalchemy import Column, String, ForeignKey, Index
from models.base_model import BaseModel, Base


class Chirp(BaseModel, Base):
    __tablename__ = "chirps"

    # Stored as posted; masking happens on the way out (see ChirpOutSchema)
    body = Column(String(140), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        Index("ix_chirps_created_at", "created_at"),
    )
