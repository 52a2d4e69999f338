from __future__ import annotations

import logging
import os
from typing import Any, Mapping

import requests

logger = logging.getLogger(__name__)

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_TIMEOUT_SECONDS = 20.0


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


class TmdbClientInitError(TmdbClientError):
    """Raised when a client cannot be constructed (e.g. blank API key)."""


def resolve_api_key(api_key: str | None = None) -> str | None:
    """
    Resolve the TMDb API key from an explicit value, falling back to `TMDB_API_KEY`.

    Returns None when neither source holds a non-blank key.
    """

    resolved = (api_key or "").strip() or (os.getenv("TMDB_API_KEY") or "").strip()
    return resolved or None


def _request_json(
    session: requests.Session,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    headers = {"accept": "application/json"}

    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TmdbClientError(f"TMDb request failed: {exc}") from exc

    if resp.status_code != 200:
        raise TmdbClientError(
            f"TMDb request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).")
    return payload


class TmdbClient:
    """
    Minimal TMDb v3 client authenticated with a static API key.

    Construction validates the key; no network call happens until a request
    method is used.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        base_url: str = TMDB_API_BASE_URL,
    ) -> None:
        key = (api_key or "").strip()
        if not key:
            raise TmdbClientInitError("TMDb API key is empty.")
        self.api_key = key
        self.session = session or requests.Session()
        self.timeout_seconds = timeout_seconds
        self.base_url = base_url.rstrip("/")

    def _get(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        merged: dict[str, Any] = {"api_key": self.api_key, **(params or {})}
        logger.debug("GET %s params=%s", url, sorted(k for k in merged if k != "api_key"))
        return _request_json(self.session, url, params=merged, timeout_seconds=self.timeout_seconds)

    def search_multi(self, query: str) -> dict[str, Any]:
        """
        Search movies, TV shows and people in one call via `/search/multi`.

        Only the first page is requested; no type filter or extra options are sent.
        """

        return self._get("/search/multi", {"query": query})

    def close(self) -> None:
        self.session.close()
