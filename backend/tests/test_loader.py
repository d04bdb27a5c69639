import pytest

from board import NUM_CATEGORIES, NUM_CLUES_PER_CATEGORY, RevealState
from conftest import FakeSource, listing, make_category
from errors import BoardLoadError, CategoryFetchError, TriviaServiceError
from loader import (
    fetch_category_ids,
    is_valid_batch,
    is_valid_category,
    load_board,
    load_categories,
    load_category,
)


class TestIsValidCategory:
    def test_normal_title(self):
        assert is_valid_category({"id": 1, "title": "potent potables"})

    def test_single_letter_title(self):
        assert not is_valid_category({"id": 1, "title": "a"})

    def test_missing_title(self):
        assert not is_valid_category({"id": 1})

    def test_too_few_clues(self):
        assert not is_valid_category({"id": 1, "title": "rivers", "clues_count": 4})

    def test_enough_clues(self):
        assert is_valid_category({"id": 1, "title": "rivers", "clues_count": 5})


class TestIsValidBatch:
    def test_short_batch(self):
        assert not is_valid_batch(listing([1, 2, 3]), 6)

    def test_duplicate_ids(self):
        assert not is_valid_batch(listing([1, 2, 3, 4, 5, 5]), 6)

    def test_good_batch(self):
        assert is_valid_batch(listing([1, 2, 3, 4, 5, 6]), 6)


class TestFetchCategoryIds:
    def test_returns_ids_in_order(self, rng):
        source = FakeSource([listing([9, 8, 7, 6, 5, 4])])
        assert fetch_category_ids(source, rng=rng) == [9, 8, 7, 6, 5, 4]
        assert len(source.list_calls) == 1

    def test_requests_six_from_random_offset(self, rng):
        source = FakeSource([listing(range(1, 7))])
        fetch_category_ids(source, max_offset=100, rng=rng)
        count, offset = source.list_calls[0]
        assert count == NUM_CATEGORIES
        assert 0 <= offset < 100

    def test_single_letter_batch_is_discarded_in_full(self, rng):
        bad = listing(range(1, 7), titles={3: "x"})
        good = listing(range(11, 17))
        source = FakeSource([bad, good])
        ids = fetch_category_ids(source, rng=rng)
        assert ids == list(range(11, 17))
        assert len(source.list_calls) == 2

    def test_gives_up_after_max_attempts(self, rng):
        bad = listing(range(1, 7), titles={1: "q"})
        source = FakeSource([bad])
        with pytest.raises(CategoryFetchError) as exc_info:
            fetch_category_ids(source, max_attempts=4, rng=rng)
        assert exc_info.value.attempts == 4
        assert len(source.list_calls) == 4

    def test_network_errors_propagate(self, rng):
        class Broken:
            def list_categories(self, count, offset):
                raise TriviaServiceError("down")

        with pytest.raises(TriviaServiceError):
            fetch_category_ids(Broken(), rng=rng)


class TestLoadCategory:
    def test_maps_clues_to_hidden(self, rng):
        source = FakeSource([], categories={5: make_category(5, "Rivers", clues=2)})
        category = load_category(source, 5, rng=rng)
        assert category.title == "Rivers"
        assert [(c.question, c.answer) for c in category.clues] == [
            ("Q5.0", "A5.0"),
            ("Q5.1", "A5.1"),
        ]
        assert all(c.state is RevealState.HIDDEN for c in category.clues)

    def test_null_fields_become_empty_text(self, rng):
        raw = {"id": 5, "title": None, "clues": [{"question": None, "answer": None}]}
        source = FakeSource([], categories={5: raw})
        category = load_category(source, 5, rng=rng)
        assert category.title == ""
        clue = category.clues[0]
        assert (clue.question, clue.answer) == ("", "")
        clue.reveal()
        assert clue.text == ""

    def test_empty_clues_pass_through(self, rng):
        source = FakeSource([], categories={5: {"id": 5, "title": "Empty", "clues": []}})
        assert load_category(source, 5, rng=rng).clues == []


class TestLoadCategories:
    def test_keeps_fetch_order(self, good_source, rng):
        ids = [6, 2, 4]
        categories = load_categories(good_source, ids, rng=rng)
        assert [c.title for c in categories] == ["Category 6", "Category 2", "Category 4"]

    def test_malformed_clue_is_collected_with_other_failures(self, good_source, rng):
        good_source.categories[2] = {"id": 2, "title": "Broken", "clues": ["not-a-dict"]}
        good_source.failing = {4}
        with pytest.raises(BoardLoadError) as exc_info:
            load_categories(good_source, [1, 2, 3, 4, 5, 6], rng=rng)
        assert set(exc_info.value.failures) == {2, 4}

    def test_aggregates_failures(self, good_source, rng):
        good_source.failing = {2, 5}
        with pytest.raises(BoardLoadError) as exc_info:
            load_categories(good_source, [1, 2, 3, 4, 5, 6], rng=rng)
        assert set(exc_info.value.failures) == {2, 5}
        # every category was still attempted
        assert sorted(cid for cid, _ in good_source.get_calls) == [1, 2, 3, 4, 5, 6]


class TestLoadBoard:
    def test_board_is_six_by_five(self, good_source, rng):
        board = load_board(good_source, rng=rng)
        assert len(board.categories) == NUM_CATEGORIES
        assert all(len(c.clues) == NUM_CLUES_PER_CATEGORY for c in board.categories)

    def test_short_category_fails_the_round(self, good_source, rng):
        good_source.categories[3] = make_category(3, clues=2)
        with pytest.raises(BoardLoadError) as exc_info:
            load_board(good_source, rng=rng)
        assert list(exc_info.value.failures) == [3]
