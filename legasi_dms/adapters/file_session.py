"""
File Session Adapter - Sessions kept in a JSON file on disk.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterator, MutableMapping, Union
from legasi_dms.adapters.memory_session import KeyValueSessionRepository

logger = logging.getLogger(__name__)


class JsonFileStore(MutableMapping):
    """
    String mapping persisted as a flat JSON object.

    Every write replaces the file atomically; every read goes to disk so
    separate processes see each other's changes.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).expanduser()

    def _load(self) -> Dict[str, str]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except ValueError as e:
            logger.warning("Ignoring corrupt session file %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self._path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def __getitem__(self, key: str) -> str:
        return self._load()[key]

    def __setitem__(self, key: str, value: str):
        data = self._load()
        data[key] = value
        self._save(data)

    def __delitem__(self, key: str):
        data = self._load()
        del data[key]
        self._save(data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._load())

    def __len__(self) -> int:
        return len(self._load())


class FileSessionRepository(KeyValueSessionRepository):
    """
    File-backed session storage.

    Survives restarts; suitable for a single user on one machine.
    """

    def __init__(
        self,
        path: Union[str, Path] = "~/.legasi_dms/session.json",
        token_key: str = "authToken",
        user_key: str = "userData",
    ):
        """
        Initialize file session repository.

        Args:
            path: JSON file location (created on first write)
            token_key: Key holding the token
            user_key: Key holding the JSON user object
        """
        super().__init__(JsonFileStore(path), token_key=token_key, user_key=user_key)
