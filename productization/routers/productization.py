import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from productization.core.database import get_db
from productization.repositories.user_repository import UserRepository
from productization.schemas.users import UserLookupResponse, UserRowOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["productization"])
user_repo = UserRepository()


def get_user_repo() -> UserRepository:
    return user_repo


HEALTH_MESSAGE = "Simple CRUD API with FastAPI, SQLAlchemy and Postgres"


@router.get("/test")
def health_check() -> dict:
    return {"status": "success", "message": HEALTH_MESSAGE}


@router.get("/test2", response_model=UserLookupResponse)
def lookup_user(
    user_id: int,
    db: Session = Depends(get_db),
    users: UserRepository = Depends(get_user_repo),
):
    logger.debug("Lookup user_id=%s", user_id)
    try:
        rows = users.list_by_id(db, user_id)
    except SQLAlchemyError as exc:
        logger.error("Database query error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "fail", "message": "Something bad happened while fetching all note items"},
        )
    return UserLookupResponse(results=[UserRowOut.model_validate(row) for row in rows])
