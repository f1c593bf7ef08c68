from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from standings.core.source import JSONLeaderboardSource, get_source
from standings.main import app
from standings.schemas.snapshot import Snapshot

from .data import SNAPSHOT


@pytest.fixture
def source() -> JSONLeaderboardSource:
    return JSONLeaderboardSource(Snapshot.model_validate(SNAPSHOT))


@pytest.fixture
def client(source: JSONLeaderboardSource) -> Iterator[TestClient]:
    app.dependency_overrides[get_source] = lambda: source
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
