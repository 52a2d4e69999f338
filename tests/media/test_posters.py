from __future__ import annotations

import base64
from unittest.mock import MagicMock

import pytest
import requests

from tmdb_data_provider.media import posters


def _image_response(status_code: int = 200, content: bytes = b"") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    return resp


def test_poster_url_builders() -> None:
    assert posters.build_small_poster_url("/abc.jpg") == "https://image.tmdb.org/t/p/w154/abc.jpg"
    assert posters.build_large_poster_link("/abc.jpg") == "https://image.tmdb.org/t/p/w500/abc.jpg"


def test_fetch_poster_base64_encodes_body_with_standard_alphabet(monkeypatch: pytest.MonkeyPatch) -> None:
    # Bytes chosen so standard and URL-safe base64 differ ("+" and "/").
    data = b"\xfb\xff\xbf\x00\x01"
    captured = {}

    def fake_get(url, timeout=None):  # noqa: ANN001
        captured["url"] = url
        captured["timeout"] = timeout
        return _image_response(content=data)

    monkeypatch.setattr(posters.requests, "get", fake_get)
    encoded = posters.fetch_poster_base64("https://image.tmdb.org/t/p/w154/x.jpg")

    assert encoded == base64.b64encode(data).decode("ascii")
    assert "+" in encoded or "/" in encoded
    assert encoded.endswith("=")
    assert captured == {"url": "https://image.tmdb.org/t/p/w154/x.jpg", "timeout": None}


def test_fetch_poster_base64_uses_session_and_timeout() -> None:
    session = MagicMock()
    session.get.return_value = _image_response(content=b"png-bytes")

    encoded = posters.fetch_poster_base64("https://img.test/p.png", session=session, timeout=3.0)

    assert base64.b64decode(encoded) == b"png-bytes"
    session.get.assert_called_once_with("https://img.test/p.png", timeout=3.0)


def test_fetch_poster_base64_empty_body_is_empty_string() -> None:
    session = MagicMock()
    session.get.return_value = _image_response(content=b"")
    assert posters.fetch_poster_base64("https://img.test/empty", session=session) == ""


@pytest.mark.parametrize("status_code", [204, 301, 404, 500])
def test_fetch_poster_base64_rejects_non_200(status_code: int) -> None:
    session = MagicMock()
    session.get.return_value = _image_response(status_code=status_code, content=b"body")

    with pytest.raises(posters.ImageFetchError) as excinfo:
        posters.fetch_poster_base64("https://img.test/p.png", session=session)

    assert excinfo.value.status_code == status_code
    assert session.get.call_count == 1


def test_fetch_poster_base64_transport_error() -> None:
    session = MagicMock()
    session.get.side_effect = requests.Timeout("timed out")

    with pytest.raises(posters.ImageFetchError) as excinfo:
        posters.fetch_poster_base64("https://img.test/p.png", session=session, timeout=0.1)

    assert excinfo.value.status_code is None
    assert session.get.call_count == 1
