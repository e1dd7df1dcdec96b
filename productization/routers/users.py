from fastapi import APIRouter, Depends

from productization.schemas.users import DirectoryUser, DirectoryUsersOut
from productization.services.user_directory import UserDirectory

router = APIRouter(prefix="/api/users", tags=["users"])
directory = UserDirectory()


def get_user_directory() -> UserDirectory:
    return directory


@router.get("", response_model=DirectoryUsersOut)
def list_users(users: UserDirectory = Depends(get_user_directory)) -> DirectoryUsersOut:
    return DirectoryUsersOut(users=list(users.snapshot()))


@router.post("", response_model=DirectoryUsersOut, status_code=201)
def add_user(user: DirectoryUser, users: UserDirectory = Depends(get_user_directory)) -> DirectoryUsersOut:
    return DirectoryUsersOut(users=list(users.add(user)))
