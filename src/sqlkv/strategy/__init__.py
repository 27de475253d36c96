"""
Dialect strategy lookup.

Strategies register themselves by dialect name on import; a store or a
connection picks its strategy from the dialect of the connection it was
given, an options object picks it from its `drivername`.
"""
from functools import lru_cache
from typing import Any

from sqlkv.strategy.base import _STRATEGY_REGISTRY
from sqlkv.strategy.base import DatabaseStrategy as DatabaseStrategy
from sqlkv.strategy.base import register_strategy as register_strategy
from sqlkv.strategy.mysql import MySQLStrategy as MySQLStrategy
from sqlkv.strategy.postgres import PostgresStrategy as PostgresStrategy
from sqlkv.strategy.sqlite import SQLiteStrategy as SQLiteStrategy
from sqlkv.utils import get_dialect_name


def get_strategy_class(dialect: str) -> type[DatabaseStrategy]:
    """Get the strategy class for a dialect without instantiating.

    Raises ValueError if no strategy is registered for the dialect.
    """
    try:
        return _STRATEGY_REGISTRY[dialect]
    except KeyError:
        available = get_available_dialects()
        raise ValueError(f'Unsupported dialect: {dialect}. Available: {available}') from None


@lru_cache(maxsize=8)
def get_strategy(dialect: str) -> DatabaseStrategy:
    """Get the shared strategy instance for a dialect name.
    """
    return get_strategy_class(dialect)()


def get_db_strategy(cn: Any) -> DatabaseStrategy:
    """Get the strategy for a connection of any supported kind.
    """
    return get_strategy(get_dialect_name(cn))


def get_available_dialects() -> list[str]:
    """Return list of registered dialect names."""
    return list(_STRATEGY_REGISTRY)


def is_supported_dialect(dialect: str) -> bool:
    """Check if a dialect is supported."""
    return dialect in _STRATEGY_REGISTRY
