from typing import Literal

from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str


class FailureResponse(BaseModel):
    """Единый конверт ошибки: {"success": false, "data": {"message": ...}}."""

    success: Literal[False] = False
    data: MessageOut
