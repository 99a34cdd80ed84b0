"""
Key-Value Session Adapters - Token and user stored under two string keys.
"""

import json
import logging
from typing import MutableMapping, Optional
from legasi_dms.ports.session_port import SessionRepository
from legasi_dms.domain.session import Session
from legasi_dms.domain.user import UserRecord

logger = logging.getLogger(__name__)


class KeyValueSessionRepository(SessionRepository):
    """
    Session storage over any string key-value mapping.

    Layout matches the web dashboard's durable store:
    - ``token_key``: the bearer token
    - ``user_key``: the user object as JSON
    """

    def __init__(
        self,
        store: MutableMapping[str, str],
        token_key: str = "authToken",
        user_key: str = "userData",
    ):
        """
        Initialize key-value session repository.

        Args:
            store: Backing mapping; read and written synchronously
            token_key: Key holding the token
            user_key: Key holding the JSON user object
        """
        self._store = store
        self._token_key = token_key
        self._user_key = user_key

    def get(self) -> Optional[Session]:
        """Read the session; a missing or corrupt user reads as no session."""
        token = self._store.get(self._token_key)
        if not token:
            return None

        raw_user = self._store.get(self._user_key)
        if raw_user is None:
            return None

        try:
            data = json.loads(raw_user)
            if not isinstance(data, dict):
                raise ValueError("user data is not an object")
        except ValueError as e:
            logger.warning("Discarding unreadable stored user data: %s", e)
            return None

        return Session(token=token, user=UserRecord.from_dict(data))

    def set(self, token: str, user: UserRecord) -> Session:
        """Write both keys."""
        self._store[self._token_key] = token
        self._store[self._user_key] = json.dumps(user.to_dict())
        return Session(token=token, user=user)

    def clear(self) -> None:
        """Remove both keys."""
        for key in (self._token_key, self._user_key):
            self._store.pop(key, None)


class MemorySessionRepository(KeyValueSessionRepository):
    """
    In-memory session storage.

    WARNING: Only for testing. Sessions are lost on restart.
    """

    def __init__(self, token_key: str = "authToken", user_key: str = "userData"):
        """Initialize in-memory storage."""
        super().__init__({}, token_key=token_key, user_key=user_key)

    @property
    def raw(self) -> MutableMapping[str, str]:
        """Underlying mapping, exposed for inspection in tests."""
        return self._store
