import threading
from typing import Iterable, Tuple

from productization.schemas.users import DirectoryUser


class UserDirectory:
    """Список пользователей в памяти.

    Читатели получают неизменяемый снимок без блокировки; запись идёт через
    единственный lock и подменяет кортеж целиком.
    """

    def __init__(self, users: Iterable[DirectoryUser] = ()):
        self._users: Tuple[DirectoryUser, ...] = tuple(users)
        self._write_lock = threading.Lock()

    def snapshot(self) -> Tuple[DirectoryUser, ...]:
        return self._users

    def add(self, user: DirectoryUser) -> Tuple[DirectoryUser, ...]:
        with self._write_lock:
            self._users = self._users + (user,)
            return self._users
