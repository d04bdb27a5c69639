"""Fetch random categories and load their clues into a Board.

`source` is anything with `list_categories(count, offset)` and
`get_category(category_id, offset)`: a TriviaClient or a SampleTriviaSource.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor

from board import NUM_CATEGORIES, NUM_CLUES_PER_CATEGORY, Board, Category, Clue
from errors import BoardLoadError, CategoryFetchError

_logger = logging.getLogger(__name__)

DEFAULT_MAX_OFFSET = 100
DEFAULT_MAX_ATTEMPTS = 10


def is_valid_category(entry):
    """Check a category listing entry is playable.

    Single-letter titles come back from the API with no usable clues, and a
    category reporting fewer clues than a column needs can't fill the board.
    """
    title = entry.get("title") or ""
    if len(title) <= 1:
        return False
    clues_count = entry.get("clues_count")
    if clues_count is not None and clues_count < NUM_CLUES_PER_CATEGORY:
        return False
    return True


def is_valid_batch(batch, count):
    """A batch is usable if it has `count` distinct, valid categories."""
    if len(batch) < count:
        return False
    batch = batch[:count]
    ids = [entry.get("id") for entry in batch]
    if None in ids or len(set(ids)) != len(ids):
        return False
    return all(is_valid_category(entry) for entry in batch)


def fetch_category_ids(source, count=NUM_CATEGORIES, max_offset=DEFAULT_MAX_OFFSET,
                       max_attempts=DEFAULT_MAX_ATTEMPTS, rng=random):
    """Return `count` category ids from a random offset.

    Any bad category throws out the whole batch and a new one is fetched from
    a fresh offset, up to `max_attempts` times.
    """
    for attempt in range(1, max_attempts + 1):
        offset = rng.randrange(max_offset)
        batch = source.list_categories(count, offset)
        if is_valid_batch(batch, count):
            return [entry["id"] for entry in batch[:count]]
        _logger.warning(
            "Rejected category batch at offset %d (attempt %d/%d)",
            offset, attempt, max_attempts,
        )
    raise CategoryFetchError(max_attempts)


def load_category(source, category_id, max_offset=DEFAULT_MAX_OFFSET, rng=random):
    """Fetch one category and map its clues to hidden Clue objects."""
    data = source.get_category(category_id, rng.randrange(max_offset))
    clues = [
        Clue(question=raw.get("question") or "", answer=raw.get("answer") or "")
        for raw in data.get("clues") or []
    ]
    return Category(title=data.get("title") or "", clues=clues)


def load_categories(source, category_ids, max_offset=DEFAULT_MAX_OFFSET, rng=random):
    """Load every category in parallel, keeping the order of `category_ids`.

    Failures of any kind, including malformed clue data, are collected and
    raised together as one BoardLoadError.
    """
    if not category_ids:
        return []
    with ThreadPoolExecutor(max_workers=len(category_ids)) as pool:
        futures = [
            (cid, pool.submit(load_category, source, cid, max_offset, rng))
            for cid in category_ids
        ]
    categories = []
    failures = {}
    for cid, future in futures:
        try:
            categories.append(future.result())
        except Exception as e:
            failures[cid] = e
    if failures:
        raise BoardLoadError(failures)
    return categories


def load_board(source, max_offset=DEFAULT_MAX_OFFSET,
               max_attempts=DEFAULT_MAX_ATTEMPTS, rng=random):
    """Run a full round fetch: ids, then clues, then a 6 x 5 Board."""
    category_ids = fetch_category_ids(
        source, NUM_CATEGORIES, max_offset=max_offset,
        max_attempts=max_attempts, rng=rng,
    )
    categories = load_categories(source, category_ids, max_offset=max_offset, rng=rng)

    short = {}
    for cid, category in zip(category_ids, categories):
        if len(category.clues) < NUM_CLUES_PER_CATEGORY:
            short[cid] = ValueError(
                f"{category.title!r} has {len(category.clues)} clues"
            )
        del category.clues[NUM_CLUES_PER_CATEGORY:]
    if short:
        raise BoardLoadError(short)
    return Board(categories)
