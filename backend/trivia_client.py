"""HTTP client for a jService-style trivia API.

Endpoints used:
- GET /categories?count=N&offset=K -> [{"id", "title", "clues_count"}, ...]
- GET /category?id=ID&offset=K     -> {"id", "title", "clues": [{"question", "answer"}, ...]}
"""

import logging

import httpx

from errors import TriviaServiceError

_logger = logging.getLogger(__name__)


class TriviaClient:
    def __init__(self, base_url, timeout=10.0, transport=None):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def _get_json(self, path, params):
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise TriviaServiceError(
                f"{path} returned {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise TriviaServiceError(f"{path} request failed: {e}") from e
        except ValueError as e:
            raise TriviaServiceError(f"{path} returned invalid JSON") from e

    def list_categories(self, count, offset):
        data = self._get_json("/categories", {"count": count, "offset": offset})
        if not isinstance(data, list):
            raise TriviaServiceError("/categories did not return a list")
        _logger.debug("Fetched %d categories at offset %d", len(data), offset)
        return data

    def get_category(self, category_id, offset):
        data = self._get_json("/category", {"id": category_id, "offset": offset})
        if not isinstance(data, dict):
            raise TriviaServiceError(f"/category?id={category_id} did not return an object")
        return data

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
