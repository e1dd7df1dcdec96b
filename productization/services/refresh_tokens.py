import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional

from sqlalchemy.orm import Session

from productization.core.clock import utcnow
from productization.core.config import settings
from productization.core.errors import InvalidRequestError, StorageError, UnauthorizedError
from productization.core.security import (
    AccessTokenCodec,
    TokenMintError,
    generate_refresh_token,
    get_access_token_codec,
)
from productization.models.refresh_token import RefreshToken
from productization.repositories.refresh_token_repository import RefreshTokenRepository
from productization.schemas.auth import TokenPair

logger = logging.getLogger(__name__)

INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"


class RefreshTokenState(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"


class RefreshTokenService:
    """Обновление access-токена по refresh-токену.

    Refresh-токен при обновлении не отзывается: один и тот же действующий
    токен можно предъявлять повторно, а в ответе возвращается он же.
    """

    def __init__(
        self,
        refresh_repo: RefreshTokenRepository | None = None,
        codec: AccessTokenCodec | None = None,
        refresh_ttl: timedelta | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.refresh_repo = refresh_repo or RefreshTokenRepository()
        self._codec = codec
        if refresh_ttl is None:
            refresh_ttl = timedelta(days=settings.refresh_token_expire_days)
        self.refresh_ttl = refresh_ttl
        self.clock = clock

    @property
    def codec(self) -> AccessTokenCodec:
        if self._codec is None:
            self._codec = get_access_token_codec()
        return self._codec

    @staticmethod
    def state_of(record: RefreshToken, now: datetime) -> RefreshTokenState:
        # строгое сравнение: в момент expires_at токен уже истёк
        if now < record.expires_at:
            return RefreshTokenState.ACTIVE
        return RefreshTokenState.EXPIRED

    def _store_new_refresh_token(self, db: Session, user_id: int) -> str:
        token = generate_refresh_token()
        self.refresh_repo.create(db, token=token, user_id=user_id, expires_at=self.clock() + self.refresh_ttl)
        return token

    def _mint_access_token(self, user_id: int) -> str:
        try:
            return self.codec.mint(user_id)
        except TokenMintError as exc:
            raise InvalidRequestError(str(exc)) from exc

    def verify(self, db: Session, refresh_token: str) -> RefreshToken:
        try:
            record = self.refresh_repo.get_by_token(db, refresh_token)
        except StorageError as exc:
            logger.warning("Refresh token lookup failed: %s", exc.__cause__ or exc)
            raise UnauthorizedError(INVALID_REFRESH_TOKEN) from exc

        if record is None:
            logger.info("Refresh rejected: unknown token")
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)
        if self.state_of(record, self.clock()) is RefreshTokenState.EXPIRED:
            logger.info("Refresh rejected: token of user %s expired at %s", record.user_id, record.expires_at)
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)
        return record

    def renew(self, db: Session, refresh_token: Optional[str]) -> TokenPair:
        logger.debug("Received refresh token request")
        if not refresh_token:
            raise InvalidRequestError("Invalid request")

        record = self.verify(db, refresh_token)
        user_id = record.user_id
        access = self._mint_access_token(user_id)

        try:
            self._store_new_refresh_token(db, user_id)
        except StorageError as exc:
            # обновление всё равно считается успешным
            logger.warning("Failed to persist rotated refresh token for user %s: %s", user_id, exc.__cause__ or exc)

        return TokenPair(token=access, refresh_token=refresh_token)
