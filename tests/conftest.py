from datetime import datetime, timezone

import pytest

from webhook_listener import create_app


class FakeStore:
    def __init__(self, error=None):
        self.items = []
        self.error = error

    def put(self, record):
        if self.error is not None:
            raise self.error
        self.items.append(record)


class AppTestConfig:
    TESTING = True
    TABLE_NAME = None
    DATABASE_URL = "sqlite:///:memory:"
    AWS_REGION = "us-east-1"
    LOG_LEVEL = "DEBUG"


FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def client(store, clock):
    ids = iter(f"req-{n}" for n in range(1, 100))
    app = create_app(AppTestConfig, store=store, id_factory=lambda: next(ids), clock=clock)
    return app.test_client()
