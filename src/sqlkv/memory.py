"""
In-memory key-value store.

Implements the same contract as SQLKeyValueStore (limits, validation,
decoding, closed state) on a dict that lives for the process lifetime.
Useful to inject into code under test instead of sharing a database.
"""
from sqlkv.options import KeyValueOptions
from sqlkv.store import KeyValueStore, require_open
from sqlkv.types import encode_uint64, to_bytes

__all__ = ['MemoryKeyValueStore']


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed key-value store.
    """

    def __init__(self, options: KeyValueOptions) -> None:
        super().__init__(options)
        self._data: dict[str, bytes] = {}

    def __len__(self) -> int:
        return len(self._data)

    @require_open
    def _lookup(self, key: str) -> bytes | None:
        return self._data.get(key)

    @require_open
    def set(self, key: str, value: str | bytes) -> None:
        self.validate(key, value)
        self._data[key] = to_bytes(value)

    @require_open
    def set_uint64(self, key: str, value: int) -> None:
        self._data[key] = encode_uint64(value)

    @require_open
    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def close(self) -> None:
        self._closed = True
        self._data.clear()
