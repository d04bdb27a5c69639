from concurrent.futures import ThreadPoolExecutor
import logging

from flask import (
    Blueprint,
    Flask,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_cors import CORS

from config import Settings
from errors import BoardNotReady, CellNotFound, GameNotFound
from game import GameStore
from sample_bank import SampleTriviaSource
from trivia_client import TriviaClient

logger = logging.getLogger(__name__)

bp = Blueprint("jeopardy", __name__)


def make_source(settings):
    """Build the clue source the settings ask for."""
    if settings.source == "sample":
        return SampleTriviaSource()
    return TriviaClient(settings.api_url, timeout=settings.api_timeout)


def create_app(settings=None, source=None):
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    executor = ThreadPoolExecutor(max_workers=4) if settings.background else None
    app.extensions["jeopardy"] = GameStore(
        source if source is not None else make_source(settings),
        settings,
        executor=executor,
    )
    app.config["JEOPARDY_SETTINGS"] = settings
    app.register_blueprint(bp)
    logger.info("Using %s clue source", settings.source)
    return app


def games():
    return current_app.extensions["jeopardy"]


# --- HTML board -------------------------------------------------------------


@bp.route("/")
def index():
    return render_template("start.html")


@bp.route("/games", methods=["POST"])
def new_game():
    """Start a game and send the player to its board."""
    game = games().create()
    return redirect(url_for("jeopardy.show_game", game_id=game.id))


@bp.route("/games/<game_id>")
def show_game(game_id):
    game = games().get(game_id)
    return render_template("board.html", game=game)


@bp.route("/games/<game_id>/restart", methods=["POST"])
def restart_game(game_id):
    games().get(game_id).restart()
    return redirect(url_for("jeopardy.show_game", game_id=game_id))


@bp.route("/games/<game_id>/cells/<cell>", methods=["POST"])
def click_cell(game_id, cell):
    games().get(game_id).reveal(cell)
    return redirect(url_for("jeopardy.show_game", game_id=game_id))


# --- JSON API ---------------------------------------------------------------


@bp.route("/api/games", methods=["POST"])
def api_create_game():
    game = games().create()
    return jsonify(game.to_dict()), 201


@bp.route("/api/games/<game_id>", methods=["GET"])
def api_get_game(game_id):
    return jsonify(games().get(game_id).to_dict())


@bp.route("/api/games/<game_id>/restart", methods=["POST"])
def api_restart_game(game_id):
    game = games().get(game_id)
    game.restart()
    return jsonify(game.to_dict()), 202


@bp.route("/api/games/<game_id>/cells/<cell>", methods=["POST"])
def api_click_cell(game_id, cell):
    """Advance one clue: hidden -> question -> answer."""
    return jsonify(games().get(game_id).reveal(cell))


# --- Errors -----------------------------------------------------------------


def _error_response(error, status):
    if request.path.startswith("/api/"):
        return jsonify({"error": str(error)}), status
    return render_template("error.html", message=str(error)), status


@bp.app_errorhandler(GameNotFound)
@bp.app_errorhandler(CellNotFound)
def handle_not_found(error):
    return _error_response(error, 404)


@bp.app_errorhandler(BoardNotReady)
def handle_not_ready(error):
    return _error_response(error, 409)


if __name__ == "__main__":
    app = create_app()
    settings = app.config["JEOPARDY_SETTINGS"]
    app.run(host=settings.host, port=settings.port, debug=False)
