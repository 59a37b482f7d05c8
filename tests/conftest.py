"""Shared fixtures and failure-injecting collaborators."""

import pytest

from tfidf_search import MemoryStorage, SearchEngine, Tokenizer


class FailingStorage(MemoryStorage):
    """Storage whose writes or reads can be made to fail on demand."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False
        self.fail_reads = False

    def append(self, text):
        if self.fail_writes:
            raise OSError("disk full")
        return super().append(text)

    def get(self, index):
        if self.fail_reads:
            raise OSError("read error")
        return super().get(index)


class FailingTokenizer(Tokenizer):
    """Tokenizer that refuses any text containing a marker word."""

    def __init__(self, marker="boom"):
        super().__init__()
        self.marker = marker

    def tokenize(self, text):
        if self.marker in text:
            raise RuntimeError("cannot analyze %r" % text)
        return super().tokenize(text)


@pytest.fixture
def engine():
    with SearchEngine() as eng:
        yield eng


@pytest.fixture
def cat_dog_engine(engine):
    engine.insert("the cat sat")
    engine.insert("the dog sat")
    return engine


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def failing_tokenizer():
    return FailingTokenizer()
