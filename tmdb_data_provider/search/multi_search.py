from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Sequence

import requests

from tmdb_data_provider.config import ProviderConfig
from tmdb_data_provider.integrations.tmdb.client import TmdbClient, TmdbClientError
from tmdb_data_provider.media.posters import fetch_poster_base64
from tmdb_data_provider.models.search import NormalizedResult, SearchResultItem, parse_search_item
from tmdb_data_provider.search.normalize import PosterFetcher, normalize_search_item

logger = logging.getLogger(__name__)


class SearchRequestError(TmdbClientError):
    pass


def join_query_terms(terms: Sequence[str]) -> str:
    if not terms:
        raise ValueError("At least one query term is required.")
    return " ".join(terms)


def _extract_items(payload: dict[str, Any]) -> list[SearchResultItem]:
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [parse_search_item(entry) for entry in results]


class _ThreadLocalPosterFetcher:
    """
    Calls `fetch_poster_base64` with one `requests.Session` per thread.

    Sessions are created lazily on first use in each thread and closed together
    by `close()`.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self.timeout = timeout
        self._local = threading.local()
        self._lock = threading.Lock()
        self._sessions: list[requests.Session] = []

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def __call__(self, url: str) -> str:
        return fetch_poster_base64(url, session=self._session(), timeout=self.timeout)

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()


def search(
    config: ProviderConfig,
    query_terms: Sequence[str],
    *,
    client: TmdbClient | None = None,
    fetch_poster: PosterFetcher | None = None,
) -> list[NormalizedResult]:
    """
    Run one `/search/multi` query and normalize every returned item.

    Results keep the upstream order and count. A failed search request raises
    `SearchRequestError` and nothing is returned; thumbnail failures only drop
    `small_poster_base64` on the affected item.
    """

    query = join_query_terms(query_terms)

    owns_client = client is None
    if client is None:
        client = TmdbClient(config.api_key, timeout_seconds=config.request_timeout_seconds)

    owned_fetcher: _ThreadLocalPosterFetcher | None = None
    try:
        try:
            payload = client.search_multi(query)
        except TmdbClientError as exc:
            raise SearchRequestError(
                f"TMDb search failed: {exc}",
                status_code=exc.status_code,
                body_snippet=exc.body_snippet,
            ) from exc

        items = _extract_items(payload)
        logger.debug("search_multi query=%r results=%d", query, len(items))

        if fetch_poster is None:
            owned_fetcher = _ThreadLocalPosterFetcher(timeout=config.image_timeout_seconds)
            fetch_poster = owned_fetcher
        normalize = partial(normalize_search_item, fetch_poster=fetch_poster)

        if config.image_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=config.image_workers) as pool:
                return list(pool.map(normalize, items))
        return [normalize(item) for item in items]
    finally:
        if owned_fetcher is not None:
            owned_fetcher.close()
        if owns_client:
            client.close()
