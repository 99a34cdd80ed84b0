"""
Adapters - Implementations of ports.

Session storage:
- KeyValueSessionRepository: any string key-value mapping
- MemorySessionRepository: In-memory sessions (testing)
- FileSessionRepository: JSON file on disk
- RedisSessionRepository: Redis-backed sessions

Backend:
- HttpAuthApi: login and onboarding endpoints (httpx)
- HttpDashboardApi: projects, data entries, media, profile (httpx)

Alerts:
- LoggingNotifier: alerts written to a logger
"""

# Session storage
from legasi_dms.adapters.memory_session import KeyValueSessionRepository, MemorySessionRepository
from legasi_dms.adapters.file_session import FileSessionRepository
from legasi_dms.adapters.redis_session import RedisSessionRepository

# Backend
from legasi_dms.adapters.http_auth_api import HttpAuthApi
from legasi_dms.adapters.http_dashboard_api import HttpDashboardApi

# Alerts
from legasi_dms.adapters.logging_notifier import LoggingNotifier

__all__ = [
    # Session storage
    "KeyValueSessionRepository",
    "MemorySessionRepository",
    "FileSessionRepository",
    "RedisSessionRepository",
    # Backend
    "HttpAuthApi",
    "HttpDashboardApi",
    # Alerts
    "LoggingNotifier",
]
