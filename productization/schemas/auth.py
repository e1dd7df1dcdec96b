from typing import Literal, Optional

from pydantic import BaseModel


class RefreshTokenRequest(BaseModel):
    refresh_token: Optional[str] = None


class TokenPair(BaseModel):
    token: str
    refresh_token: str


class TokenPairResponse(BaseModel):
    success: Literal[True] = True
    data: TokenPair
