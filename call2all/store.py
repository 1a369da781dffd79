"""
Token storage implementations for the call2all SDK
"""

import os
import json
import logging
from abc import ABC, abstractmethod
from .constants import TOKEN_STORAGE_KEY
from .exceptions import StoreError

logger = logging.getLogger(__name__)

class Store(ABC):
    """Abstract base class for key-value storage"""

    @abstractmethod
    def get(self, key):
        """Get the value stored under key, or None"""
        pass

    @abstractmethod
    def set(self, key, value):
        """Store value under key, overwriting any previous value"""
        pass

    @abstractmethod
    def remove(self, key):
        """Remove key if present"""
        pass

class MemoryStore(Store):
    """In-memory storage implementation"""

    def __init__(self):
        self._data = {}

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)

class FileStore(Store):
    """Durable storage backed by a JSON object on disk"""

    def __init__(self, path):
        self.path = os.path.expanduser(os.fspath(path))

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            raise StoreError(f'{self.path}: {e}') from e
        if not isinstance(data, dict):
            raise StoreError(f'{self.path}: expected a JSON object')
        return data

    def _dump(self, data):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f'{self.path}.tmp'
        try:
            with open(tmp_path, 'w', encoding='utf-8') as fh:
                json.dump(data, fh)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        os.replace(tmp_path, self.path)

    def get(self, key):
        return self._load().get(key)

    def set(self, key, value):
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove(self, key):
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)

class TokenStorage:
    """Accessors for the single stored API token.

    The client never touches the token on its own; callers read it here and
    pass it to every request explicitly.
    """

    def __init__(self, store=None, key=TOKEN_STORAGE_KEY):
        self.store = store if store is not None else MemoryStore()
        self.key = key

    def get_stored_token(self) -> str:
        """Return the stored token, or an empty string"""
        return self.store.get(self.key) or ''

    def set_stored_token(self, token: str) -> None:
        self.store.set(self.key, token)
        logger.debug('Stored token under %r', self.key)

    def clear_stored_token(self) -> None:
        self.store.remove(self.key)
        logger.debug('Cleared token under %r', self.key)
