"""
Python SDK for the call2all ym API
"""

from .client import Call2AllClient, LoginResponse
from .constants import BASE_URL, TOKEN_STORAGE_KEY
from .exceptions import Call2AllError, ConfigError, StoreError
from .store import Store, MemoryStore, FileStore, TokenStorage

__all__ = [
    'Call2AllClient',
    'LoginResponse',
    'BASE_URL',
    'TOKEN_STORAGE_KEY',
    'Call2AllError',
    'ConfigError',
    'StoreError',
    'Store',
    'MemoryStore',
    'FileStore',
    'TokenStorage',
]
