"""
Session Port - Interface for session persistence.

Implementations:
- KeyValueSessionRepository: any string key-value store (two keys)
- MemorySessionRepository: In-memory sessions (testing only)
- FileSessionRepository: JSON file on disk
- RedisSessionRepository: Redis-backed sessions
"""

from abc import ABC, abstractmethod
from typing import Optional
from legasi_dms.domain.session import Session
from legasi_dms.domain.user import UserRecord


class SessionRepository(ABC):
    """Port: Persist the current token and user."""

    @abstractmethod
    def get(self) -> Optional[Session]:
        """
        Read the stored session.

        Returns:
            Session if a token and a readable user are stored, None otherwise
        """
        pass

    @abstractmethod
    def set(self, token: str, user: UserRecord) -> Session:
        """
        Store a session, replacing any previous one.

        Args:
            token: Bearer token
            user: User record to store alongside it

        Returns:
            Stored session
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored session (logout)."""
        pass

    def token(self) -> Optional[str]:
        """Bearer token of the stored session, if any."""
        session = self.get()
        return session.token if session else None
