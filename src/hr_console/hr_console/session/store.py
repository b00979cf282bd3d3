from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Protocol

from flask import session as flask_session


class TokenStore(Protocol):
    """Durable key/value storage for the bearer token.

    Note (DIP): SessionManager depends on this interface, not on a concrete backend.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryTokenStore:
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileTokenStore:
    """JSON file on disk; survives process restarts (used by scripts)."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except ValueError:
            # Corrupted file counts as anonymous.
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data), encoding="utf-8")
        tmp.replace(self._path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return str(value) if value else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class FlaskSessionTokenStore:
    """Browser-side storage: the signed Flask session cookie."""

    def get(self, key: str) -> Optional[str]:
        return flask_session.get(key)

    def set(self, key: str, value: str) -> None:
        flask_session[key] = value

    def delete(self, key: str) -> None:
        flask_session.pop(key, None)
