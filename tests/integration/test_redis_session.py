"""
Integration tests for Redis session repository.

Requires Redis running on localhost:6379
Skip tests if Redis is not available.
"""

import pytest

from legasi_dms.domain.user import UserRecord

redis = pytest.importorskip("redis")

PREFIX = "test:legasi:session:"


@pytest.fixture
def redis_repo():
    """Create Redis session repository (skip if Redis unavailable)."""
    from legasi_dms.adapters import RedisSessionRepository

    r = redis.Redis(host="localhost", port=6379, decode_responses=True)
    try:
        r.ping()
    except redis.exceptions.ConnectionError:
        pytest.skip("Redis not available")

    yield RedisSessionRepository(redis_client=r, prefix=PREFIX)

    # Cleanup: delete all test keys
    for key in r.scan_iter(f"{PREFIX}*"):
        r.delete(key)


class TestRedisSessionRepository:
    """Test Redis session storage."""

    def test_set_and_get(self, redis_repo):
        user = UserRecord(id=11, role="project_manager", email="pm@example.com", email_verified=True)

        redis_repo.set("tok", user)
        session = redis_repo.get()

        assert session.token == "tok"
        assert session.user == user

    def test_overwrite(self, redis_repo):
        redis_repo.set("old", UserRecord(id=1, temporal_password=True))
        redis_repo.set("new", UserRecord(id=1, temporal_password=False))

        session = redis_repo.get()
        assert session.token == "new"
        assert not session.user.temporal_password

    def test_clear(self, redis_repo):
        redis_repo.set("tok", UserRecord(id=1))

        redis_repo.clear()

        assert redis_repo.get() is None

    def test_corrupt_user_reads_as_no_session(self, redis_repo):
        r = redis_repo._get_redis()
        r.mset({f"{PREFIX}authToken": "tok", f"{PREFIX}userData": "{broken"})

        assert redis_repo.get() is None
