"""
Key-value stores.

KeyValueStore is the contract: get/set/delete over string keys plus typed
unsigned 64-bit accessors and close(). SQLKeyValueStore implements it on a
single relational table through three prepared statements (select, upsert,
delete) generated by the connection's dialect strategy.

Absence is not an error: get() returns '' and get_uint64() returns 0 for a
key that has no row, and delete() of a missing key is a no-op.
"""
import logging
from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Self

from sqlkv.exceptions import StoreClosedError, ValidationError
from sqlkv.options import KeyValueOptions
from sqlkv.statement import PreparedStatement
from sqlkv.strategy import get_db_strategy
from sqlkv.types import byte_length, decode_uint64, encode_uint64, to_bytes
from sqlkv.types import to_text
from sqlkv.utils import get_raw_connection

__all__ = [
    'KeyValueStore',
    'SQLKeyValueStore',
    'require_open',
]

logger = logging.getLogger(__name__)


def require_open(func):
    """Raise StoreClosedError when the store has been closed."""

    @wraps(func)
    def inner(self, *args, **kwargs):
        if self.closed:
            raise StoreClosedError(f'{type(self).__name__} is closed')
        return func(self, *args, **kwargs)

    return inner


class KeyValueStore(ABC):
    """Generic key-value contract.

    Implementations validate `set()` input against the configured limits
    before storing anything, and share the open -> closed lifecycle:
    once closed, every operation raises StoreClosedError.
    """

    def __init__(self, options: KeyValueOptions) -> None:
        self.options = options
        self.max_key_len = options.max_key_len
        self.max_value_len = options.max_value_len
        self._closed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None,
                 exc_tb: Any | None) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def validate(self, key: str, value: str | bytes) -> None:
        """Check key and value byte lengths against the configured limits.
        """
        if byte_length(key) > self.max_key_len:
            raise ValidationError(f'Key is too long (max {self.max_key_len} bytes)')
        if byte_length(value) > self.max_value_len:
            raise ValidationError(f'Value is too long (max {self.max_value_len} bytes)')

    @abstractmethod
    def _lookup(self, key: str) -> bytes | None:
        """Return the stored payload for key, or None if there is no row."""

    def get_bytes(self, key: str) -> bytes:
        """Return the raw value for key, or b'' if the key has no value."""
        data = self._lookup(key)
        if data is None:
            return b''
        return data

    def get(self, key: str) -> str:
        """Return the value for key as text, or '' if the key has no value.

        Raises DecodeError if the stored value is not valid UTF-8; read
        binary values with get_bytes() instead.
        """
        return to_text(self.get_bytes(key))

    @abstractmethod
    def set(self, key: str, value: str | bytes) -> None:
        """Insert or overwrite the value for key."""

    def get_uint64(self, key: str) -> int:
        """Return the value for key as an unsigned 64-bit integer.

        Returns 0 if the key has no value. Raises DecodeError if the
        stored value is not exactly 8 bytes long.
        """
        data = self._lookup(key)
        if data is None:
            return 0
        return decode_uint64(data)

    @abstractmethod
    def set_uint64(self, key: str, value: int) -> None:
        """Store value as 8 little-endian bytes under key."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Removing a missing key is not an error."""

    @abstractmethod
    def close(self) -> None:
        """Release held resources. The store is not usable afterwards."""


class SQLKeyValueStore(KeyValueStore):
    """Key-value store backed by a relational table.

    The connection is supplied and owned by the caller: closing the store
    releases its prepared statements, never the connection.

    Usage:
        cn = sqlkv.connect('sqlite', config=config)
        with SQLKeyValueStore(cn, options) as kv:
            kv.set('foo', 'bar')
            kv.get('foo')
    """

    def __init__(self, cn: Any, options: KeyValueOptions) -> None:
        super().__init__(options)
        self.strategy = get_db_strategy(cn)
        raw_conn = get_raw_connection(cn)

        get_sql = self.strategy.build_get_sql(options)
        set_sql = self.strategy.build_set_sql(options)
        del_sql = self.strategy.build_delete_sql(options)

        prepared: list[PreparedStatement] = []
        try:
            for sql, param_count in ((get_sql, 1), (set_sql, 2), (del_sql, 1)):
                prepared.append(PreparedStatement(self.strategy, raw_conn, sql, param_count))
        except Exception:
            for stmt in prepared:
                try:
                    stmt.close()
                except Exception as e:
                    logger.warning(f'Error releasing {stmt!r} after failed construction: {e}')
            raise

        self.stmt_get, self.stmt_set, self.stmt_del = prepared
        logger.debug(f'Opened {self.strategy.dialect_name} key-value store on table {options.table_name}')

    @require_open
    def _lookup(self, key: str) -> bytes | None:
        value = self.stmt_get.query_value(key)
        if value is None:
            return None
        return to_bytes(value)

    @require_open
    def set(self, key: str, value: str | bytes) -> None:
        self.validate(key, value)
        self.stmt_set.execute(key, to_bytes(value))

    @require_open
    def set_uint64(self, key: str, value: int) -> None:
        self.stmt_set.execute(key, encode_uint64(value))

    @require_open
    def delete(self, key: str) -> None:
        self.stmt_del.execute(key)

    def close(self) -> None:
        """Release all three prepared statements.

        Every statement is released even if an earlier release fails; the
        first failure is raised once all releases were attempted.
        """
        if self._closed:
            return
        self._closed = True

        first_error = None
        for stmt in (self.stmt_set, self.stmt_get, self.stmt_del):
            try:
                stmt.close()
            except Exception as e:
                if first_error is None:
                    first_error = e
                else:
                    logger.warning(f'Error releasing {stmt!r}: {e}')

        if first_error is not None:
            raise first_error
        logger.debug(f'Closed key-value store on table {self.options.table_name}')
