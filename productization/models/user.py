from typing import Optional

from sqlalchemy import Column, Integer, String

from productization.models.base import Base


class User(Base):
    __tablename__ = "mst_user"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    email: str = Column(String, unique=True, nullable=False, index=True)
    user_name: Optional[str] = Column(String, nullable=True)
