import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JOSEError

from productization.core.config import settings


class TokenMintError(Exception):
    """Не удалось подписать access-токен."""


class TokenVerificationError(Exception):
    """Базовая ошибка проверки access-токена."""


class AccessTokenInvalidError(TokenVerificationError):
    """Подпись не сходится или токен повреждён."""


class AccessTokenExpiredError(TokenVerificationError):
    """Срок действия токена истёк."""


@dataclass(frozen=True)
class AccessTokenClaims:
    user_id: int
    expires_at: int


class AccessTokenCodec:
    """Подписывает и проверяет короткоживущие access-токены (JWT)."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(minutes=1)):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def mint(self, user_id: int, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "user_id": user_id,
            "exp": int((now + self.expires_delta).timestamp()),
            "iat": int(now.timestamp()),
        }
        try:
            return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)
        except JOSEError as exc:
            raise TokenMintError(str(exc)) from exc

    def verify(self, token: str) -> AccessTokenClaims:
        # подпись и exp проверяются одним вызовом библиотеки
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise AccessTokenExpiredError(str(exc)) from exc
        except JWTError as exc:
            raise AccessTokenInvalidError(str(exc)) from exc

        user_id = payload.get("user_id")
        exp = payload.get("exp")
        if not isinstance(user_id, int) or not isinstance(exp, int):
            raise AccessTokenInvalidError("malformed token claims")
        return AccessTokenClaims(user_id=user_id, expires_at=exp)


def generate_refresh_token() -> str:
    """Непрозрачный refresh-токен из криптостойкого источника."""
    return secrets.token_urlsafe(32)


def get_access_token_codec() -> AccessTokenCodec:
    return AccessTokenCodec(
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
