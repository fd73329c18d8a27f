"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
token helpers, an in-memory stand-in for the MongoDB collection, and an
app wired to both through dependency overrides.
"""

import copy
from datetime import datetime, timezone, timedelta

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient
from pymongo.results import DeleteResult, InsertOneResult

from api.app import create_app
from api.dependencies import get_task_service, get_token_service, reset_container
from modules.auth.service import TokenService
from modules.tasks.repository import TaskRepository
from modules.tasks.service import TaskService


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789abcdef0123456789abcdef"

TEST_USER_EMAIL = "test@example.com"


def create_test_token(
    subject: str = TEST_USER_EMAIL,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    algorithm: str = "HS256",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        subject: Identity to put in the sub claim
        expired: If True, creates an expired token
        secret: Signing key
        algorithm: JWS algorithm

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": subject,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


class FakeClock:
    """Deterministic clock: each call returns a time one second after the last."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        self.calls += 1
        return value


def evaluate(expr, doc: dict):
    """Evaluate the aggregation expressions TaskRepository uses in updates."""
    if isinstance(expr, str) and expr.startswith("$"):
        return doc[expr[1:]]
    if not isinstance(expr, dict):
        return expr
    (op, arg), = expr.items()
    if op == "$literal":
        return arg
    if op == "$max":
        return max(evaluate(a, doc) for a in arg)
    if op == "$add":
        values = [evaluate(a, doc) for a in arg]
        dates = [v for v in values if isinstance(v, datetime)]
        millis = sum(v for v in values if not isinstance(v, datetime))
        return dates[0] + timedelta(milliseconds=millis)
    raise NotImplementedError(op)


class FakeCursor:
    """Cursor over a snapshot of documents."""

    def __init__(self, docs: list[dict]):
        self._docs = docs
        self.closed = False

    def sort(self, keys: list[tuple[str, int]]) -> "FakeCursor":
        for key, direction in reversed(keys):
            self._docs.sort(key=lambda d: d[key], reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(copy.deepcopy(self._docs))

    def close(self) -> None:
        self.closed = True


class FakeCollection:
    """
    In-memory stand-in for the pymongo Collection calls TaskRepository makes.

    Records every operation name in ``calls`` so tests can assert that a
    request never reached the store.
    """

    def __init__(self):
        self.docs: dict = {}
        self.calls: list[str] = []
        self.cursors: list[FakeCursor] = []

    def create_index(self, keys, **kwargs) -> str:
        self.calls.append("create_index")
        return "createdAt_-1__id_-1"

    def find(self, filter: dict) -> FakeCursor:
        self.calls.append("find")
        cursor = FakeCursor(list(self.docs.values()))
        self.cursors.append(cursor)
        return cursor

    def find_one(self, filter: dict):
        self.calls.append("find_one")
        doc = self.docs.get(filter["_id"])
        return copy.deepcopy(doc)

    def insert_one(self, doc: dict) -> InsertOneResult:
        self.calls.append("insert_one")
        self.docs[doc["_id"]] = copy.deepcopy(doc)
        return InsertOneResult(doc["_id"], True)

    def find_one_and_update(self, filter: dict, update, return_document=None):
        self.calls.append("find_one_and_update")
        doc = self.docs.get(filter["_id"])
        if doc is None:
            return None
        for stage in update:
            values = {name: evaluate(expr, doc) for name, expr in stage["$set"].items()}
            doc.update(copy.deepcopy(values))
        return copy.deepcopy(doc)

    def delete_one(self, filter: dict) -> DeleteResult:
        self.calls.append("delete_one")
        removed = self.docs.pop(filter["_id"], None)
        return DeleteResult({"n": 0 if removed is None else 1, "ok": 1}, True)


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def make_token():
    """Expose create_test_token to tests."""
    return create_test_token


@pytest.fixture
def token_service() -> TokenService:
    """Token service using the test secret."""
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def task_repository(collection: FakeCollection, clock: FakeClock) -> TaskRepository:
    return TaskRepository(collection, clock=clock)


@pytest.fixture
def task_service(task_repository: TaskRepository) -> TaskService:
    return TaskService(task_repository)


@pytest.fixture
def app(token_service: TokenService, task_service: TaskService):
    """Create a fresh app wired to the test token service and fake store."""
    app = create_app()
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_task_service] = lambda: task_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
