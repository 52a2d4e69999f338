from __future__ import annotations

import json
from typing import Iterable

from tmdb_data_provider.models.search import NormalizedResult


class SerializationError(RuntimeError):
    pass


def render_results_json(results: Iterable[NormalizedResult]) -> str:
    """Serialize results as a two-space indented JSON array; absent poster fields are omitted."""

    try:
        return json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Error marshaling results: {exc}") from exc
