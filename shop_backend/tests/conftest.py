import os

os.environ["SHOP_DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SHOP_SEED_DEMO_DATA"] = "false"

from contextlib import contextmanager  # noqa: E402
from typing import List  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import event  # noqa: E402

import src.db.models  # noqa: E402,F401
from src.api.main import app  # noqa: E402
from src.db.base import Base  # noqa: E402
from src.db.seed import seed_demo_data  # noqa: E402
from src.db.session import SessionLocal, engine  # noqa: E402


class SelectCounter:
    def __init__(self) -> None:
        self.statements: List[str] = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany) -> None:
        if statement.lstrip().upper().startswith("SELECT"):
            self.statements.append(statement)

    @property
    def count(self) -> int:
        return len(self.statements)


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seeded(db_session):
    seed_demo_data(db_session)
    return db_session


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def count_selects():
    @contextmanager
    def _count():
        counter = SelectCounter()
        event.listen(engine, "before_cursor_execute", counter)
        try:
            yield counter
        finally:
            event.remove(engine, "before_cursor_execute", counter)

    return _count
