from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from productization.core.database import get_db
from productization.schemas.auth import RefreshTokenRequest, TokenPairResponse
from productization.schemas.common import FailureResponse
from productization.services.refresh_tokens import RefreshTokenService

router = APIRouter(prefix="/api", tags=["auth"])
refresh_service = RefreshTokenService()


def get_refresh_service() -> RefreshTokenService:
    return refresh_service


@router.post(
    "/refresh_token",
    response_model=TokenPairResponse,
    responses={400: {"model": FailureResponse}, 401: {"model": FailureResponse}},
)
def refresh_token(
    request: RefreshTokenRequest,
    db: Session = Depends(get_db),
    service: RefreshTokenService = Depends(get_refresh_service),
) -> TokenPairResponse:
    pair = service.renew(db, request.refresh_token)
    return TokenPairResponse(data=pair)
