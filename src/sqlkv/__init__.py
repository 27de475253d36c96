"""
Key-value store on a relational table, with support for PostgreSQL, SQLite and MySQL.

All store operations can be called either as:
- Module functions: kv.get(store, key)
- Store methods: store.get(key)

The module functions are facades over the KeyValueStore methods.
"""
__version__ = '0.1.0'

from typing import Any

from sqlkv.connection import ConnectionWrapper, connect
from sqlkv.exceptions import DbConnectionError, DecodeError, IntegrityError
from sqlkv.exceptions import KeyValueError, OperationalError, ProgrammingError
from sqlkv.exceptions import StoreClosedError, ValidationError
from sqlkv.memory import MemoryKeyValueStore
from sqlkv.options import DatabaseOptions, KeyValueOptions
from sqlkv.store import KeyValueStore, SQLKeyValueStore

from libb import load_options


def open_store(cn: Any, options: KeyValueOptions | dict[str, Any] | str,
               config: Any | None = None, **kw: Any) -> SQLKeyValueStore:
    """Open a key-value store on an existing connection.

    Args:
        cn: Open connection; stays owned by the caller
        options: KeyValueOptions object, dict, or name of a setting in config
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options
    """
    if not isinstance(options, KeyValueOptions):
        options_func = load_options(cls=KeyValueOptions)(lambda o, c: o)
        options = options_func(options, config, **kw)
    return SQLKeyValueStore(cn, options)


def get(store: KeyValueStore, key: str) -> str:
    """Return the value for key, or '' if the key has no value.
    """
    return store.get(key)


def get_bytes(store: KeyValueStore, key: str) -> bytes:
    """Return the raw value for key, or b'' if the key has no value.
    """
    return store.get_bytes(key)


def set(store: KeyValueStore, key: str, value: str | bytes) -> None:
    """Insert or overwrite the value for key.

    Raises ValidationError if key or value exceeds the store's limits.
    """
    store.set(key, value)


def get_uint64(store: KeyValueStore, key: str) -> int:
    """Return the value for key as an unsigned 64-bit integer, or 0.
    """
    return store.get_uint64(key)


def set_uint64(store: KeyValueStore, key: str, value: int) -> None:
    """Store value as 8 little-endian bytes under key.
    """
    store.set_uint64(key, value)


def delete(store: KeyValueStore, key: str) -> None:
    """Remove key; a missing key is not an error.
    """
    store.delete(key)


def close(store: KeyValueStore) -> None:
    """Release the store's statements.
    """
    store.close()


__all__ = [
    'connect',
    'open_store',
    'ConnectionWrapper',
    'DatabaseOptions',
    'KeyValueOptions',
    'KeyValueStore',
    'SQLKeyValueStore',
    'MemoryKeyValueStore',
    'get',
    'get_bytes',
    'set',
    'get_uint64',
    'set_uint64',
    'delete',
    'close',
    'KeyValueError',
    'ValidationError',
    'DecodeError',
    'StoreClosedError',
    'DbConnectionError',
    'IntegrityError',
    'ProgrammingError',
    'OperationalError',
]
