from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from productization.models.user import User


class UserRepository:
    def list_by_id(self, db: Session, user_id: int) -> List[User]:
        return list(db.execute(select(User).where(User.id == user_id)).scalars())

    def create(self, db: Session, email: str, user_name: Optional[str] = None) -> User:
        user = User(email=email, user_name=user_name)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
