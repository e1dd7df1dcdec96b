from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from productization.core.clock import utcnow
from productization.core.errors import StorageError
from productization.models.refresh_token import RefreshToken


class RefreshTokenRepository:
    def create(self, db: Session, token: str, user_id: int, expires_at: datetime) -> RefreshToken:
        record = RefreshToken(token=token, user_id=user_id, expires_at=expires_at)
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except SQLAlchemyError as exc:
            # дубликат токена тоже сюда: токен обязан быть уникальным
            db.rollback()
            raise StorageError("Failed to store refresh token") from exc
        return record

    def get_by_token(self, db: Session, token: str) -> Optional[RefreshToken]:
        try:
            return db.execute(select(RefreshToken).where(RefreshToken.token == token)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to look up refresh token") from exc

    def purge_expired(self, db: Session, now: Optional[datetime] = None) -> int:
        """Удаляем истёкшие refresh-токены; возвращаем число удалённых записей."""
        moment = now or utcnow()
        result = db.execute(delete(RefreshToken).where(RefreshToken.expires_at <= moment))
        db.commit()
        return result.rowcount
