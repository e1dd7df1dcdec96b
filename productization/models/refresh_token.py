from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from productization.core.clock import utcnow
from productization.models.base import Base


class RefreshToken(Base):
    __tablename__ = "trn_refresh_tokens"

    token: str = Column(String, primary_key=True)
    user_id: int = Column(Integer, ForeignKey("mst_user.id"), nullable=False, index=True)
    expires_at: datetime = Column(DateTime, nullable=False)
    created_at: datetime = Column(DateTime, default=utcnow, nullable=False)
