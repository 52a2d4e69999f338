from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


def find_env_file() -> Path | None:
    """Return the first `.env` found in the working directory or the project root."""

    project_root = Path(__file__).resolve().parents[2]
    for path in (Path.cwd() / ".env", project_root / ".env"):
        if path.is_file():
            return path
    return None


def load_env(*, override: bool = False) -> Path | None:
    """
    Load `TMDB_API_KEY` (and friends) from a `.env` file when one exists.

    Variables already set in the process environment win unless `override=True`.
    """

    path = find_env_file()
    if path is not None:
        load_dotenv(dotenv_path=path, override=override)
    return path
