from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    user_name: Optional[str] = None


class UserLookupResponse(BaseModel):
    status: str = "success"
    results: List[UserRowOut]


class DirectoryUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    name: str = Field(min_length=1)


class DirectoryUsersOut(BaseModel):
    users: List[DirectoryUser]
