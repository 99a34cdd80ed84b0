"""
Redis Session Adapter - Redis-backed session storage.
"""

import json
import logging
from typing import Optional
from legasi_dms.ports.session_port import SessionRepository
from legasi_dms.domain.session import Session
from legasi_dms.domain.user import UserRecord

logger = logging.getLogger(__name__)


class RedisSessionRepository(SessionRepository):
    """
    Redis-backed session storage.

    Token and user JSON live under two keys sharing a prefix, so several
    dashboard clients can share one Redis by using distinct prefixes.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: Optional[str] = None,
        prefix: str = "legasi:session:",
        token_key: str = "authToken",
        user_key: str = "userData",
    ):
        """
        Initialize Redis session repository.

        Args:
            redis_client: Redis client instance (redis.Redis)
            redis_url: URL used to build a client when none is given
            prefix: Key prefix for both keys
            token_key: Key holding the token
            user_key: Key holding the JSON user object
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix
        self._token_key = token_key
        self._user_key = user_key

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            try:
                import redis
            except ImportError:
                raise ImportError("redis package required: pip install redis")

            if self._redis_url:
                self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
            else:
                self._redis = redis.Redis(
                    host="localhost",
                    port=6379,
                    db=0,
                    decode_responses=True,
                )
        return self._redis

    def _key(self, name: str) -> str:
        """Generate Redis key."""
        return f"{self._prefix}{name}"

    def get(self) -> Optional[Session]:
        """Read the session from Redis."""
        redis = self._get_redis()
        token, raw_user = redis.mget(self._key(self._token_key), self._key(self._user_key))

        if not token or raw_user is None:
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
        """Write both keys in one round trip."""
        redis = self._get_redis()
        redis.mset({
            self._key(self._token_key): token,
            self._key(self._user_key): json.dumps(user.to_dict()),
        })
        return Session(token=token, user=user)

    def clear(self) -> None:
        """Delete both keys."""
        redis = self._get_redis()
        redis.delete(self._key(self._token_key), self._key(self._user_key))
