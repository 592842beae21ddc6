import asyncio

import pytest

from import_engine.errors import StoreFailure
from import_engine.records import CompanyRecord


class MemoryStore:
    """In-memory CompanyStore that records every call it receives."""

    def __init__(self, records=(), fail_on_write=None):
        self.records = {r.email: r for r in records}
        self.calls = []
        self.writes = 0
        self._fail_on_write = fail_on_write    # 1-based write number that fails

    async def get(self, email):
        self.calls.append(("get", email))
        return self.records.get(email)

    async def create(self, record):
        self._write("create", record)

    async def save(self, record):
        self._write("save", record)

    def _write(self, op, record):
        self.calls.append((op, record.email))
        if self._fail_on_write and self.writes + 1 == self._fail_on_write:
            raise StoreFailure("connection lost")
        self.writes += 1
        self.records[record.email] = record


def csv_bytes(*lines):
    return ("\n".join(lines) + "\n").encode("utf-8")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def acme_store():
    return MemoryStore([CompanyRecord(email="a@x.com", name="Acme", industry="")])


@pytest.fixture
def run():
    return asyncio.run


@pytest.fixture
def app(tmp_path, monkeypatch):
    import config
    from main import create_app

    monkeypatch.setattr(config, "STATIC_DIR", tmp_path / "dist")
    app = create_app(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
