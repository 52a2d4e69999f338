from __future__ import annotations

import base64

import requests

SMALL_POSTER_BASE_URL = "https://image.tmdb.org/t/p/w154"
LARGE_POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"


class ImageFetchError(RuntimeError):
    """
    A poster download failed.

    `status_code` is set when the server answered with a non-200 status and is
    None for transport failures (DNS, refused connection, timeout).
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def build_small_poster_url(poster_path: str) -> str:
    return f"{SMALL_POSTER_BASE_URL}{poster_path}"


def build_large_poster_link(poster_path: str) -> str:
    return f"{LARGE_POSTER_BASE_URL}{poster_path}"


def fetch_poster_base64(
    url: str,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> str:
    """
    Download an image and return its body as standard (padded) base64 text.

    Performs exactly one GET; nothing is retried or cached.
    """

    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=timeout)
    except requests.RequestException as exc:
        raise ImageFetchError(f"Image request failed: {exc}") from exc

    if resp.status_code != 200:
        raise ImageFetchError(
            f"Image request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
        )

    data = resp.content or b""
    return base64.b64encode(data).decode("ascii")
