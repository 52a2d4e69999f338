from __future__ import annotations

from typing import Callable

from tmdb_data_provider.media.posters import (
    ImageFetchError,
    build_large_poster_link,
    build_small_poster_url,
    fetch_poster_base64,
)
from tmdb_data_provider.models.search import (
    MovieResult,
    NormalizedResult,
    OtherResult,
    SearchResultItem,
    TvResult,
)

PosterFetcher = Callable[[str], str]


def _select_titles(item: SearchResultItem) -> tuple[str, str, str]:
    """Return (full_title, original_title, release_date) for one variant."""

    if isinstance(item, MovieResult):
        return item.title, item.original_title, item.release_date
    if isinstance(item, TvResult):
        return item.name, item.original_name, item.first_air_date
    if isinstance(item, OtherResult):
        # Unknown media types reuse the movie field names.
        return item.title, item.original_title, item.release_date
    raise TypeError(f"Unsupported search result item: {type(item).__name__}")


def _fetch_small_poster(poster_path: str, fetch_poster: PosterFetcher) -> str | None:
    """
    Best-effort thumbnail enrichment.

    This is the only place an `ImageFetchError` is discarded: the result simply
    has no `small_poster_base64`.
    """

    try:
        return fetch_poster(build_small_poster_url(poster_path))
    except ImageFetchError:
        return None


def normalize_search_item(
    item: SearchResultItem,
    *,
    fetch_poster: PosterFetcher = fetch_poster_base64,
) -> NormalizedResult:
    full_title, original_title, release_date = _select_titles(item)

    small_poster: str | None = None
    large_poster: str | None = None
    if item.poster_path:
        large_poster = build_large_poster_link(item.poster_path)
        small_poster = _fetch_small_poster(item.poster_path, fetch_poster)

    return NormalizedResult(
        id=item.id,
        type=item.media_type,
        full_title=full_title,
        original_title=original_title,
        release_date=release_date,
        overview=item.overview,
        small_poster_base64=small_poster,
        large_poster_link=large_poster,
    )
