"""
SQLite-specific strategy implementation.

This module implements the DatabaseStrategy interface with SQLite-specific operations.
It handles SQLite's features such as:
- `?` placeholders
- INSERT ... ON CONFLICT DO UPDATE for upserts
- Explicit BINARY collation on key lookups, overriding a NOCASE column
- Statement caching by the sqlite3 module (no server-side prepare)
"""
import logging
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlkv.strategy.base import DatabaseStrategy, register_strategy

if TYPE_CHECKING:
    from sqlkv.options import DatabaseOptions, KeyValueOptions

logger = logging.getLogger(__name__)


@register_strategy('sqlite')
class SQLiteStrategy(DatabaseStrategy):
    """SQLite-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for SQLite."""
        return 'sqlite'

    def build_connection_url(self, options: 'DatabaseOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL for SQLite."""
        return sa.URL.create(drivername='sqlite', database=options.database)

    def get_engine_kwargs(self, options: 'DatabaseOptions') -> dict[str, Any]:
        """Return SQLAlchemy create_engine kwargs for SQLite."""
        if options.timeout:
            return {'connect_args': {'timeout': options.timeout}}
        return {}

    @classmethod
    def get_required_options(cls) -> list[str]:
        """Return required options for SQLite connections."""
        return ['database']

    def configure_connection(self, raw_conn: Any) -> None:
        """Configure connection settings for SQLite.
        """
        raw_conn.execute('PRAGMA foreign_keys = ON')
        self.enable_autocommit(raw_conn)
        logger.debug('Configured SQLite connection for auto-commit')

    def enable_autocommit(self, raw_conn: Any) -> None:
        """Enable auto-commit mode for SQLite.
        """
        raw_conn.isolation_level = None

    def get_placeholder_style(self) -> str:
        """Return SQLite's placeholder marker.
        """
        return '?'

    def key_predicate(self, quoted_key: str) -> str:
        """Compare keys with BINARY collation regardless of the column's.
        """
        return f'{quoted_key} = ? COLLATE BINARY'

    def build_set_sql(self, options: 'KeyValueOptions') -> str:
        """Generate SQLite upsert SQL using INSERT ... ON CONFLICT.
        """
        _, key, value = self._quoted(options)
        return (f'{self._insert_sql(options)} '
                f'ON CONFLICT ({key}) DO UPDATE SET {value} = excluded.{value}')
