"""
PostgreSQL-specific strategy implementation.

This module implements the DatabaseStrategy interface with PostgreSQL-specific operations.
It handles PostgreSQL's features such as:
- INSERT ... ON CONFLICT DO UPDATE for upserts
- Server-side prepared statements through psycopg's `prepare` flag
- Auto-commit on the psycopg connection
"""
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlkv.strategy.base import DatabaseStrategy, register_strategy

if TYPE_CHECKING:
    from sqlkv.options import DatabaseOptions, KeyValueOptions


@register_strategy('postgresql')
class PostgresStrategy(DatabaseStrategy):
    """PostgreSQL-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for PostgreSQL."""
        return 'postgresql'

    def build_connection_url(self, options: 'DatabaseOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL for PostgreSQL."""
        query = {}
        if options.timeout:
            query['connect_timeout'] = str(options.timeout)
        if options.appname:
            query['application_name'] = options.appname

        return sa.URL.create(
            drivername='postgresql+psycopg',
            username=options.username,
            password=options.password,
            host=options.hostname,
            port=options.port,
            database=options.database,
            query=query,
        )

    @classmethod
    def get_required_options(cls) -> list[str]:
        """Return required options for PostgreSQL connections."""
        return ['hostname', 'username', 'password', 'database', 'port', 'timeout']

    def enable_autocommit(self, raw_conn: Any) -> None:
        """Enable auto-commit mode for PostgreSQL.
        """
        raw_conn.autocommit = True

    def build_set_sql(self, options: 'KeyValueOptions') -> str:
        """Generate PostgreSQL upsert SQL using INSERT ... ON CONFLICT.
        """
        _, key, value = self._quoted(options)
        return (f'{self._insert_sql(options)} '
                f'ON CONFLICT ({key}) DO UPDATE SET {value} = excluded.{value}')

    def execute_statement(self, cursor: Any, sql: str, params: tuple) -> None:
        """Execute with server-side preparation.

        psycopg prepares the statement on the server and reuses the plan on
        subsequent executions of the same query on the connection.
        """
        cursor.execute(sql, params, prepare=True)
