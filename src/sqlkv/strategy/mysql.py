"""
MySQL-specific strategy implementation.

Uses ``mysql.connector`` from the ``mysql-connector-python`` package, installed
with the ``mysql`` extra. This module implements the DatabaseStrategy interface
with MySQL-specific operations:
- Backtick identifier quoting
- INSERT ... ON DUPLICATE KEY UPDATE for upserts
- ``= CAST(%s AS BINARY)`` key lookups, so case-insensitive collations still match
  keys byte-for-byte
- Server-side prepared cursors
"""
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlkv.strategy.base import DatabaseStrategy, register_strategy

if TYPE_CHECKING:
    from sqlkv.options import DatabaseOptions, KeyValueOptions


@register_strategy('mysql')
class MySQLStrategy(DatabaseStrategy):
    """MySQL / MariaDB operations.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for MySQL."""
        return 'mysql'

    def build_connection_url(self, options: 'DatabaseOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL for MySQL."""
        query = {'charset': 'utf8mb4'}

        return sa.URL.create(
            drivername='mysql+mysqlconnector',
            username=options.username,
            password=options.password,
            host=options.hostname,
            port=options.port,
            database=options.database,
            query=query,
        )

    def get_engine_kwargs(self, options: 'DatabaseOptions') -> dict[str, Any]:
        """Return SQLAlchemy create_engine kwargs for MySQL."""
        if options.timeout:
            return {'connect_args': {'connection_timeout': options.timeout}}
        return {}

    @classmethod
    def get_required_options(cls) -> list[str]:
        """Return required options for MySQL connections."""
        return ['hostname', 'username', 'password', 'database', 'port']

    def enable_autocommit(self, raw_conn: Any) -> None:
        """Enable auto-commit mode for MySQL.
        """
        raw_conn.autocommit = True

    def key_predicate(self, quoted_key: str) -> str:
        """Compare keys as binary strings.
        """
        return f'{quoted_key} = CAST(%s AS BINARY)'

    def build_set_sql(self, options: 'KeyValueOptions') -> str:
        """Generate MySQL upsert SQL using INSERT ... ON DUPLICATE KEY UPDATE.
        """
        _, _, value = self._quoted(options)
        return (f'{self._insert_sql(options)} '
                f'ON DUPLICATE KEY UPDATE {value} = VALUES({value})')

    def create_statement_cursor(self, raw_conn: Any) -> Any:
        """Create a server-side prepared cursor.
        """
        return raw_conn.cursor(prepared=True)
