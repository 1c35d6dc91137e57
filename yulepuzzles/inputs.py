"""Loading puzzle inputs, from a local cache or from the puzzle site."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.request import Request, urlopen

from dotenv import find_dotenv, load_dotenv

INPUT_URL = "https://adventofcode.com/2024/day/{day}/input"
SESSION_VARIABLE = "AOC_SESSION"


class MissingSessionError(RuntimeError):
    """Raised when an input must be downloaded but no session is configured."""


def _cache_path(day: int, directory: str | os.PathLike[str]) -> Path:
    return Path(directory) / f"day{day:02d}.txt"


def get_input(day: int, directory: str | os.PathLike[str] = "inputs") -> str:
    """Return the input for ``day``, downloading and caching it when needed."""
    cache = _cache_path(day, directory)
    if cache.exists():
        return cache.read_text(encoding="utf-8")

    load_dotenv(find_dotenv(usecwd=True))
    session = os.environ.get(SESSION_VARIABLE)
    if session is None:
        raise MissingSessionError(
            f"environment variable {SESSION_VARIABLE} is not set"
        )

    request = Request(
        INPUT_URL.format(day=day),
        headers={"Cookie": f"session={session}"},
    )
    with urlopen(request) as response:
        text = response.read().decode("utf-8")

    cache.parent.mkdir(parents=True, exist_ok=True)
    cache.write_text(text, encoding="utf-8")
    return text