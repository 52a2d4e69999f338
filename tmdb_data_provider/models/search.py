from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _str_field(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def _int_field(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    if isinstance(value, bool):
        return 0
    return value if isinstance(value, int) else 0


@dataclass(frozen=True)
class MovieResult:
    id: int
    title: str = ""
    original_title: str = ""
    release_date: str = ""
    overview: str = ""
    poster_path: str = ""
    media_type: str = "movie"


@dataclass(frozen=True)
class TvResult:
    id: int
    name: str = ""
    original_name: str = ""
    first_air_date: str = ""
    overview: str = ""
    poster_path: str = ""
    media_type: str = "tv"


@dataclass(frozen=True)
class OtherResult:
    """
    Any `/search/multi` item that is neither a movie nor a TV show.

    `media_type` keeps the upstream value ("person", an unknown tag, or "" when missing).
    """

    id: int
    media_type: str = ""
    title: str = ""
    original_title: str = ""
    release_date: str = ""
    overview: str = ""
    poster_path: str = ""


SearchResultItem = MovieResult | TvResult | OtherResult


def parse_search_item(payload: Any) -> SearchResultItem:
    """
    Build the typed variant for one entry of a `/search/multi` `results` list.

    Missing or mistyped string fields become "" and a missing id becomes 0, so
    every upstream entry yields exactly one item.
    """

    if not isinstance(payload, Mapping):
        return OtherResult(id=0)

    media_type = _str_field(payload, "media_type")
    item_id = _int_field(payload, "id")
    overview = _str_field(payload, "overview")
    poster_path = _str_field(payload, "poster_path")

    if media_type == "movie":
        return MovieResult(
            id=item_id,
            title=_str_field(payload, "title"),
            original_title=_str_field(payload, "original_title"),
            release_date=_str_field(payload, "release_date"),
            overview=overview,
            poster_path=poster_path,
        )
    if media_type == "tv":
        return TvResult(
            id=item_id,
            name=_str_field(payload, "name"),
            original_name=_str_field(payload, "original_name"),
            first_air_date=_str_field(payload, "first_air_date"),
            overview=overview,
            poster_path=poster_path,
        )
    return OtherResult(
        id=item_id,
        media_type=media_type,
        title=_str_field(payload, "title"),
        original_title=_str_field(payload, "original_title"),
        release_date=_str_field(payload, "release_date"),
        overview=overview,
        poster_path=poster_path,
    )


@dataclass(frozen=True)
class NormalizedResult:
    """
    Flat search record printed by the CLI.

    The two poster fields are independent: `large_poster_link` is set whenever
    the item had a poster path, `small_poster_base64` only when the thumbnail
    download also succeeded.
    """

    id: int
    type: str
    full_title: str
    original_title: str
    release_date: str
    overview: str
    small_poster_base64: str | None = None
    large_poster_link: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "full_title": self.full_title,
            "original_title": self.original_title,
            "release_date": self.release_date,
            "overview": self.overview,
        }
        if self.small_poster_base64 is not None:
            out["small_poster_base64"] = self.small_poster_base64
        if self.large_poster_link is not None:
            out["large_poster_link"] = self.large_poster_link
        return out
