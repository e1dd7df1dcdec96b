import logging
import threading
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from productization.repositories.refresh_token_repository import RefreshTokenRepository

logger = logging.getLogger(__name__)


class RefreshTokenCleanup:
    """Фоновая очистка истёкших refresh-токенов.

    Поток ждёт на Event, поэтому stop() прерывает паузу между проходами сразу.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        repo: RefreshTokenRepository,
        interval_seconds: float,
    ):
        self.session_factory = session_factory
        self.repo = repo
        self.interval_seconds = interval_seconds
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> int:
        with self.session_factory() as db:
            return self.repo.purge_expired(db)

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                purged = self.run_once()
            except SQLAlchemyError as exc:
                logger.warning("Failed to purge expired refresh tokens: %s", exc)
            else:
                if purged:
                    logger.info("Purged %d expired refresh tokens", purged)
            self._stop.wait(self.interval_seconds)

    def start(self) -> threading.Thread:
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="refresh-token-cleanup", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("Refresh token cleanup did not stop within %.1fs", timeout)


_cleanup: Optional[RefreshTokenCleanup] = None
_lock = threading.Lock()


def start_refresh_token_cleanup(
    session_factory: Callable[[], Session], repo: RefreshTokenRepository, interval_seconds: int
) -> Optional[RefreshTokenCleanup]:
    """Запускает очистку один раз на процесс; interval_seconds <= 0 её отключает."""
    global _cleanup

    if interval_seconds <= 0:
        return None

    with _lock:
        if _cleanup is None or not _cleanup.running:
            _cleanup = RefreshTokenCleanup(session_factory, repo, interval_seconds)
            _cleanup.start()
        return _cleanup


def stop_refresh_token_cleanup(timeout: float = 5.0) -> None:
    global _cleanup

    with _lock:
        if _cleanup is not None:
            _cleanup.stop(timeout)
            _cleanup = None
