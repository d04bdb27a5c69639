"""Exceptions raised while fetching, loading and playing a board."""


class JeopardyError(Exception):
    """Base class for everything this app raises on purpose."""


class TriviaServiceError(JeopardyError):
    """The trivia service could not be reached or sent back garbage."""


class CategoryFetchError(JeopardyError):
    """No usable batch of categories after the retry cap."""

    def __init__(self, attempts):
        super().__init__(f"No valid category batch after {attempts} attempts")
        self.attempts = attempts


class BoardLoadError(JeopardyError):
    """One or more categories failed to load for a round."""

    def __init__(self, failures):
        # failures: {category_id: exception}
        ids = ", ".join(str(cid) for cid in failures)
        super().__init__(f"Could not load categories: {ids}")
        self.failures = failures


class GameNotFound(JeopardyError):
    pass


class CellNotFound(JeopardyError):
    pass


class BoardNotReady(JeopardyError):
    """The board is still loading or the last round failed."""
