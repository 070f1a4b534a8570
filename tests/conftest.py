import json
import logging

import pytest
from fastapi.testclient import TestClient

from dverbs.app import create_app
from dverbs.config import settings
from dverbs.engine import QuizEngine
from dverbs.models import Verb
from dverbs.repository import VerbRepository

SAMPLE_VERBS = [
    {
        "infinitive": "spise",
        "present": "spiser",
        "past": "spiste",
        "past_participle": "spist",
        "english": "to eat",
    },
    {
        "infinitive": "drikke",
        "present": "drikker",
        "past": "drak",
        "past_participle": "drukket",
        "english": "to drink",
    },
    {
        "infinitive": "være",
        "present": "er",
        "past": "var",
        "past_participle": "været",
        "english": "to be",
    },
]


def write_dataset(path, payload):
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setattr(settings, "DB_DIR", str(tmp_path / "db"))
    yield
    logger = logging.getLogger("dverbs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def sample_verbs():
    return [Verb(**item) for item in SAMPLE_VERBS]


@pytest.fixture
def dataset_path(tmp_path):
    return write_dataset(tmp_path / "verbs.json", SAMPLE_VERBS)


@pytest.fixture
def engine(sample_verbs):
    quiz = QuizEngine(seed=1234)
    quiz.initialize(sample_verbs)
    return quiz


@pytest.fixture
def client(dataset_path):
    app = create_app(repository=VerbRepository(dataset_path), seed=7)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(tmp_path):
    app = create_app(repository=VerbRepository(str(tmp_path / "missing.json")))
    with TestClient(app) as test_client:
        yield test_client
