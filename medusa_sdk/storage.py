"""
Medusa SDK Token Storage Implementations

Each client instance owns one store; a store holds at most one token.
"""

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from .types import DEFAULT_JWT_STORAGE_KEY


class MemoryStorage:
    """In-memory token storage (default, non-persistent)."""

    def __init__(self) -> None:
        self._token: Optional[str] = None
        self._lock = threading.Lock()

    def get_token(self) -> Optional[str]:
        """Get the stored token."""
        with self._lock:
            return self._token

    def set_token(self, token: str) -> None:
        """Store a token, replacing any previous one."""
        with self._lock:
            self._token = token

    def clear_token(self) -> None:
        """Remove the stored token."""
        with self._lock:
            self._token = None


class NoStorage:
    """Storage that never keeps a token."""

    def get_token(self) -> Optional[str]:
        return None

    def set_token(self, token: str) -> None:
        pass

    def clear_token(self) -> None:
        pass


class FileStorage:
    """File-based token storage (persistent across restarts)."""

    def __init__(self, file_path: Optional[str] = None, key: str = DEFAULT_JWT_STORAGE_KEY) -> None:
        """
        Initialize file storage.

        Args:
            file_path: Path to token file. Defaults to ~/.medusa/tokens.json
            key: Entry name of the token inside the file
        """
        if file_path:
            self._file_path = Path(file_path)
        else:
            self._file_path = Path.home() / ".medusa" / "tokens.json"

        self._key = key
        self._lock = threading.Lock()
        self._ensure_directory()

    def _ensure_directory(self) -> None:
        """Ensure the storage directory exists."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

    def _read_data(self) -> Dict[str, Any]:
        """Read token data from file."""
        try:
            if self._file_path.exists():
                with open(self._file_path, "r") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        return data
        except (json.JSONDecodeError, IOError):
            pass
        return {}

    def _write_data(self, data: Dict[str, Any]) -> None:
        """Write token data to file."""
        with open(self._file_path, "w") as f:
            json.dump(data, f)
        # Owner read/write only
        os.chmod(self._file_path, 0o600)

    def get_token(self) -> Optional[str]:
        """Get the stored token."""
        with self._lock:
            return self._read_data().get(self._key)

    def set_token(self, token: str) -> None:
        """Store a token, replacing any previous one."""
        with self._lock:
            data = self._read_data()
            data[self._key] = token
            self._write_data(data)

    def clear_token(self) -> None:
        """Remove the stored token, keeping other entries in the file."""
        with self._lock:
            data = self._read_data()
            if self._key not in data:
                return
            del data[self._key]
            if data:
                self._write_data(data)
            else:
                self._file_path.unlink()
