"""
Domain models shared across the search pipeline and the CLI.
"""

from tmdb_data_provider.models.search import (
    MovieResult,
    NormalizedResult,
    OtherResult,
    SearchResultItem,
    TvResult,
    parse_search_item,
)

__all__ = [
    "MovieResult",
    "NormalizedResult",
    "OtherResult",
    "SearchResultItem",
    "TvResult",
    "parse_search_item",
]
