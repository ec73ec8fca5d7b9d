import pytest
from fastapi.testclient import TestClient

from vocabtrainer.app import create_app
from vocabtrainer.config import settings
from vocabtrainer.globals import get_trainer
from vocabtrainer.models import WordEntry
from vocabtrainer.store import WordStore
from vocabtrainer.trainer import VocabTrainer

TEST_KEY = "vocabtrainer-test:v1"


class WordList:
    """In-memory stand-in for the read side of a word store."""

    def __init__(self, entries):
        self.entries = list(entries)

    def list_words(self):
        return list(self.entries)

    def count(self):
        return len(self.entries)


def build_words(*pairs):
    return [
        WordEntry(id=f"w{i}", word=word, translation=translation)
        for i, (word, translation) in enumerate(pairs)
    ]


@pytest.fixture
def make_words():
    def _make(*pairs):
        return WordList(build_words(*pairs))

    return _make


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "db" / "test.db")


@pytest.fixture
def store(db_path):
    word_store = WordStore(TEST_KEY, db_path=db_path)
    word_store.load()
    return word_store


@pytest.fixture
def trainer(store):
    return VocabTrainer(store)


@pytest.fixture
def app_dirs(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_DIR", str(tmp_path / "appdb"))
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    return tmp_path


@pytest.fixture
def client(app_dirs, trainer):
    app = create_app()
    app.dependency_overrides[get_trainer] = lambda: trainer
    with TestClient(app) as test_client:
        yield test_client
