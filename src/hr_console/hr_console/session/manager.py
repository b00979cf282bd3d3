from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.constants import LOGIN_FAILED_MESSAGE, TOKEN_KEY
from ..core.enums import SessionState
from ..core.exceptions import AuthenticationError
from .store import TokenStore

Listener = Callable[[SessionState], None]
Authenticator = Callable[[str, str], str]


@dataclass(frozen=True)
class Session:
    token: Optional[str]

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)


class SessionManager:
    """Single source of truth for the bearer token.

    The token lives in a `TokenStore` under a fixed key. `login`, `logout` and
    `expire` are the only mutation points; dependents observe state changes
    through `subscribe`.
    """

    def __init__(self, store: TokenStore, *, authenticate: Optional[Authenticator] = None, key: str = TOKEN_KEY):
        self._store = store
        self._key = key
        self._authenticate = authenticate
        self._lock = threading.Lock()
        self._token: Optional[str] = store.get(key)
        self._listeners: list[Listener] = []

    def bind(self, authenticate: Authenticator) -> None:
        self._authenticate = authenticate

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    @property
    def state(self) -> SessionState:
        return SessionState.AUTHENTICATED if self._token else SessionState.ANONYMOUS

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def login(self, username: str, password: str) -> Session:
        if self._authenticate is None:
            raise RuntimeError("SessionManager has no authenticator bound")

        # Raises AuthenticationError; prior state stays untouched.
        token = self._authenticate(username, password)
        if not token:
            raise AuthenticationError(LOGIN_FAILED_MESSAGE)

        with self._lock:
            previous = self.state
            self._store.set(self._key, token)
            self._token = token
        if previous != SessionState.AUTHENTICATED:
            self._notify(SessionState.AUTHENTICATED)
        return Session(token=token)

    def logout(self) -> None:
        with self._lock:
            previous = self.state
            self._store.delete(self._key)
            self._token = None
        if previous != SessionState.ANONYMOUS:
            self._notify(SessionState.ANONYMOUS)

    def expire(self) -> None:
        """Forced logout after the backend rejected the token."""
        self.logout()

    def _notify(self, state: SessionState) -> None:
        for listener in list(self._listeners):
            listener(state)
