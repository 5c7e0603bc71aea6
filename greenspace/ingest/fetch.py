"""Raw dataset retrieval from a local file or an HTTP(S) URL."""

from __future__ import annotations

from pathlib import Path

from greenspace.common.errors import RetrievalError
from greenspace.common.fs import read_text
from greenspace.common.http import HttpClient


def is_remote(source: str | Path) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def fetch_raw_text(source: str | Path, client: HttpClient | None = None) -> str:
    if is_remote(source):
        if client is not None:
            return client.get_text(str(source))
        with HttpClient() as owned:
            return owned.get_text(str(source))

    path = Path(source)
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise RetrievalError(f"Could not read {path}: {exc}") from exc
