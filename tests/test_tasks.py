import threading
from contextlib import contextmanager
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from productization.core import tasks
from productization.core.config import settings
from productization.core.tasks import (
    RefreshTokenCleanup,
    start_refresh_token_cleanup,
    stop_refresh_token_cleanup,
)
from productization.main import create_app


class RecordingRepo:
    def __init__(self, result: int = 0):
        self.result = result
        self.calls = 0
        self.purged = threading.Event()

    def purge_expired(self, db):
        self.calls += 1
        self.purged.set()
        return self.result


class FailingRepo(RecordingRepo):
    def purge_expired(self, db):
        super().purge_expired(db)
        raise OperationalError("DELETE", {}, Exception("db down"))


@contextmanager
def fake_session():
    yield object()


@pytest.fixture(autouse=True)
def reset_cleanup() -> Generator[None, None, None]:
    yield
    stop_refresh_token_cleanup()


def test_cleanup_disabled_by_zero_interval():
    assert start_refresh_token_cleanup(fake_session, RecordingRepo(), interval_seconds=0) is None


def test_run_once_returns_purged_count():
    cleanup = RefreshTokenCleanup(fake_session, RecordingRepo(result=3), interval_seconds=60)

    assert cleanup.run_once() == 3


def test_worker_exits_on_stop():
    repo = RecordingRepo()
    cleanup = RefreshTokenCleanup(fake_session, repo, interval_seconds=3600)

    thread = cleanup.start()
    assert repo.purged.wait(timeout=5)
    cleanup.stop(timeout=5)

    assert not thread.is_alive()
    assert not cleanup.running
    assert repo.calls == 1


def test_worker_survives_database_error():
    repo = FailingRepo()
    cleanup = RefreshTokenCleanup(fake_session, repo, interval_seconds=3600)

    cleanup.start()
    assert repo.purged.wait(timeout=5)

    assert cleanup.running
    cleanup.stop(timeout=5)


def test_start_is_idempotent_while_running():
    first = start_refresh_token_cleanup(fake_session, RecordingRepo(), interval_seconds=3600)
    second = start_refresh_token_cleanup(fake_session, RecordingRepo(), interval_seconds=3600)

    assert first is not None and first is second
    assert first.running


def test_stop_clears_running_cleanup():
    cleanup = start_refresh_token_cleanup(fake_session, RecordingRepo(), interval_seconds=3600)

    stop_refresh_token_cleanup()

    assert not cleanup.running
    assert tasks._cleanup is None


def test_app_shutdown_stops_cleanup(monkeypatch):
    monkeypatch.setattr(settings, "refresh_cleanup_interval_seconds", 3600)

    with TestClient(create_app()):
        cleanup = tasks._cleanup
        assert cleanup is not None and cleanup.running

    assert not cleanup.running
    assert tasks._cleanup is None
