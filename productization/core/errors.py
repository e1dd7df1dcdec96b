from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from productization.schemas.common import FailureResponse, MessageOut


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired refresh token"


class StorageError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage failure"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    body = FailureResponse(data=MessageOut(message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(ServiceError, service_error_handler)
