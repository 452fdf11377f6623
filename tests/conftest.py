import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="monk-mode-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir}/test.db"
os.environ["STORE_BACKEND"] = "file"
os.environ["DATA_FILE"] = os.path.join(_tmp_dir, "db.json")
os.environ["STREAK_MODE"] = "naive"

import pytest
from fastapi.testclient import TestClient

from app.core.errors import StorageUnavailable
from app.main import app
from app.services.store import DocumentStore, FileDocumentStore, get_store


class BrokenStore(DocumentStore):
    def __init__(self, error=None):
        self.error = error or StorageUnavailable("store is down")

    async def get(self):
        raise self.error

    async def set(self, document):
        raise self.error


@pytest.fixture
def store(tmp_path):
    return FileDocumentStore(tmp_path / "db.json")


@pytest.fixture
def use_store():
    def _use(store):
        app.dependency_overrides[get_store] = lambda: store
    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def client(store, use_store):
    use_store(store)
    return TestClient(app)


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def failing_store():
    return BrokenStore(RuntimeError("unexpected"))


def _make_log(day, **fields):
    log = {
        "date": day,
        "deep_work_hours": 0,
        "phone_screen_time": 0,
        "exercise_done": False,
        "exercise_type": "",
        "sleep_hours": 0,
        "sleep_quality": 0,
        "mood_score": 5,
        "meditation_done": False,
        "notes": "",
    }
    log.update(fields)
    return log


@pytest.fixture
def make_log():
    return _make_log
