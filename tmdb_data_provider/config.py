from __future__ import annotations

from dataclasses import dataclass

from tmdb_data_provider.integrations.tmdb.client import DEFAULT_TIMEOUT_SECONDS, resolve_api_key
from tmdb_data_provider.utils.env import load_env

MISSING_API_KEY_MESSAGE = "API key not provided. Use --api-key flag or set TMDB_API_KEY environment variable"


class MissingApiKeyError(RuntimeError):
    pass


@dataclass(frozen=True)
class ProviderConfig:
    """
    Run configuration, resolved once at startup and passed down explicitly.

    `image_timeout_seconds=None` leaves thumbnail downloads on the HTTP client's
    default (no timeout).
    """

    api_key: str
    request_timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS
    image_timeout_seconds: float | None = None
    image_workers: int = 1


def resolve_config(
    api_key: str | None = None,
    *,
    image_timeout_seconds: float | None = None,
    image_workers: int = 1,
    load_dotenv_file: bool = True,
) -> ProviderConfig:
    if load_dotenv_file:
        load_env()

    resolved = resolve_api_key(api_key)
    if not resolved:
        raise MissingApiKeyError(MISSING_API_KEY_MESSAGE)

    if int(image_workers) < 1:
        raise ValueError("image_workers must be >= 1.")
    if image_timeout_seconds is not None and image_timeout_seconds <= 0:
        raise ValueError("image_timeout_seconds must be > 0.")

    return ProviderConfig(
        api_key=resolved,
        image_timeout_seconds=image_timeout_seconds,
        image_workers=int(image_workers),
    )
