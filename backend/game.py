"""Games: one board per game, with its loading status and restart handling."""

import logging
import threading
import uuid
from collections import OrderedDict

from board import cell_to_dict, parse_cell_id
from errors import BoardNotReady, GameNotFound
from loader import load_board

_logger = logging.getLogger(__name__)

LOADING = "loading"
READY = "ready"
ERROR = "error"


class Game:
    """Owns a board and advances it through rounds.

    Every restart bumps `generation`. A round that finishes after a newer
    restart is dropped, so two quick restarts can't race on the board.
    """

    def __init__(self, game_id, load, executor=None):
        self.id = game_id
        self._load = load
        self._executor = executor
        self._lock = threading.Lock()
        self.board = None
        self.status = LOADING
        self.error = None
        self.generation = 0

    def begin_round(self):
        """Clear the board and enter the loading view. Returns the new generation."""
        with self._lock:
            self.generation += 1
            self.board = None
            self.status = LOADING
            self.error = None
            return self.generation

    def finish_round(self, generation, board=None, error=None):
        """Install a round's result unless a newer round has started."""
        with self._lock:
            if generation != self.generation:
                _logger.info(
                    "Game %s: discarding stale round %d (current %d)",
                    self.id, generation, self.generation,
                )
                return False
            if error is not None:
                self.board = None
                self.status = ERROR
                self.error = str(error)
            else:
                self.board = board
                self.status = READY
            return True

    def _run_round(self, generation):
        _logger.info("Game %s: loading round %d", self.id, generation)
        try:
            board = self._load()
        except Exception as e:
            _logger.exception("Game %s: round %d failed", self.id, generation)
            self.finish_round(generation, error=e)
            return
        if self.finish_round(generation, board=board):
            _logger.info("Game %s: round %d ready", self.id, generation)

    def restart(self):
        """Start a new round, in the background if an executor is set."""
        generation = self.begin_round()
        if self._executor is not None:
            self._executor.submit(self._run_round, generation)
        else:
            self._run_round(generation)
        return generation

    def reveal(self, cell):
        """Advance the clue at `cell` ("<category>-<clue>") and return its cell dict."""
        category_index, clue_index = parse_cell_id(cell)
        with self._lock:
            if self.status != READY:
                raise BoardNotReady(f"Game {self.id} is {self.status}")
            clue = self.board.reveal(category_index, clue_index)
            return cell_to_dict(category_index, clue_index, clue)

    @property
    def loading(self):
        return self.status == LOADING

    def to_dict(self):
        with self._lock:
            return {
                "id": self.id,
                "status": self.status,
                "generation": self.generation,
                "error": self.error,
                "categories": self.board.to_dict() if self.board else [],
            }


class GameStore:
    """In-memory games keyed by id, holding at most `settings.max_games`."""

    def __init__(self, source, settings, executor=None):
        self.source = source
        self.settings = settings
        self.executor = executor
        self._games = OrderedDict()
        self._lock = threading.Lock()

    def _load(self):
        return load_board(
            self.source,
            max_offset=self.settings.max_offset,
            max_attempts=self.settings.max_attempts,
        )

    def create(self):
        game = Game(uuid.uuid4().hex[:12], self._load, executor=self.executor)
        with self._lock:
            self._games[game.id] = game
            # Oldest games go first once the store is full
            while len(self._games) > self.settings.max_games:
                dropped, _ = self._games.popitem(last=False)
                _logger.info("Dropped game %s", dropped)
        game.restart()
        return game

    def get(self, game_id):
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFound(f"No game {game_id}")
        return game
