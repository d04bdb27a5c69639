import random

import pytest

from config import Settings
from errors import TriviaServiceError


def make_category(cid, title=None, clues=5):
    return {
        "id": cid,
        "title": title or f"Category {cid}",
        "clues": [
            {"question": f"Q{cid}.{n}", "answer": f"A{cid}.{n}"} for n in range(clues)
        ],
    }


class FakeSource:
    """Scripted trivia source: hands out `batches` in order, then repeats the last."""

    def __init__(self, batches, categories=None, failing=()):
        self.batches = list(batches)
        self.categories = categories or {}
        self.failing = set(failing)
        self.list_calls = []
        self.get_calls = []

    def list_categories(self, count, offset):
        self.list_calls.append((count, offset))
        index = min(len(self.list_calls), len(self.batches)) - 1
        return self.batches[index]

    def get_category(self, category_id, offset):
        self.get_calls.append((category_id, offset))
        if category_id in self.failing:
            raise TriviaServiceError(f"boom {category_id}")
        return self.categories[category_id]


def listing(ids, titles=None):
    titles = titles or {}
    return [{"id": cid, "title": titles.get(cid, f"Category {cid}")} for cid in ids]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def good_source():
    ids = list(range(1, 7))
    return FakeSource(
        [listing(ids)],
        categories={cid: make_category(cid, clues=8) for cid in ids},
    )


@pytest.fixture
def settings():
    return Settings(source="sample", background=False, max_attempts=3)
