"""
Base strategy interface for key-value statement handling.

Defines the abstract base class that all database-specific strategy implementations
must inherit from. The strategy pattern allows for encapsulating database-specific
behaviors while presenting a consistent interface to the rest of the application.

Each concrete strategy generates the three key-value statements (select, upsert,
delete) with database-specific SQL, and knows how to prepare and execute them
on its driver's cursors.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from sqlkv.sql import make_placeholders
from sqlkv.sql import quote_identifier as sql_quote_identifier

if TYPE_CHECKING:
    from sqlkv.options import DatabaseOptions, KeyValueOptions

# Registry of dialect name -> strategy class
# Defined here to avoid circular imports (concrete strategies import from base)
_STRATEGY_REGISTRY: dict[str, type['DatabaseStrategy']] = {}


def register_strategy(dialect: str):
    """Decorator to register a strategy class for a dialect.

    Usage:
        @register_strategy('postgresql')
        class PostgresStrategy(DatabaseStrategy):
            ...
    """
    def decorator(cls: type['DatabaseStrategy']) -> type['DatabaseStrategy']:
        _STRATEGY_REGISTRY[dialect] = cls
        return cls
    return decorator


class DatabaseStrategy(ABC):
    """Base class for database-specific operations.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the dialect identifier (e.g., 'postgresql', 'sqlite')."""

    @abstractmethod
    def build_connection_url(self, options: 'DatabaseOptions') -> Any:
        """Build the database connection URL for this dialect.

        Args:
            options: DatabaseOptions containing connection parameters

        Returns
            SQLAlchemy URL for create_engine
        """

    def get_engine_kwargs(self, options: 'DatabaseOptions') -> dict[str, Any]:
        """Return SQLAlchemy create_engine kwargs for this dialect.

        Args:
            options: DatabaseOptions containing connection parameters

        Returns
            Dictionary of keyword arguments for create_engine
        """
        return {}

    @abstractmethod
    def enable_autocommit(self, raw_conn: Any) -> None:
        """Enable auto-commit mode on a raw database connection.

        Args:
            raw_conn: The raw DBAPI connection (not wrapped)
        """

    def configure_connection(self, raw_conn: Any) -> None:
        """Configure connection settings.

        Every key-value operation is a single statement, so connections
        run in auto-commit mode.

        Args:
            raw_conn: The raw DBAPI connection (not wrapped)
        """
        self.enable_autocommit(raw_conn)

    @classmethod
    @abstractmethod
    def get_required_options(cls) -> list[str]:
        """Return list of required option field names for this dialect.

        Returns
            List of field names that must have non-None/non-zero values
        """

    @classmethod
    def validate_options(cls, options: 'DatabaseOptions') -> None:
        """Validate options for this dialect.

        Args:
            options: DatabaseOptions to validate

        Raises
            ValueError: If any required field is None or 0
        """
        for field in cls.get_required_options():
            if not getattr(options, field):
                raise ValueError(f'field {field} cannot be None or 0')

    def quote_identifier(self, identifier: str) -> str:
        """Quote a database identifier.

        Default implementation uses standard SQL double-quote escaping.
        Override in subclasses if database requires different quoting.

        Args:
            identifier: Database identifier to be quoted

        Returns
            str: Properly quoted identifier according to database-specific rules
        """
        return sql_quote_identifier(identifier, self.dialect_name)

    def get_placeholder_style(self) -> str:
        """Return the placeholder marker for this database.

        Returns
            str: '%s' for PostgreSQL-style, '?' for SQLite-style
        """
        return '%s'

    def _quoted(self, options: 'KeyValueOptions') -> tuple[str, str, str]:
        """Quote table, key column and value column names."""
        return (self.quote_identifier(options.table_name),
                self.quote_identifier(options.key_column),
                self.quote_identifier(options.value_column))

    def key_predicate(self, quoted_key: str) -> str:
        """Return the WHERE condition matching a key byte-for-byte.

        Args:
            quoted_key: Quoted key column name

        Returns
            str: Condition with one placeholder for the key
        """
        return f'{quoted_key} = {self.get_placeholder_style()}'

    def build_get_sql(self, options: 'KeyValueOptions') -> str:
        """Generate the select-value-by-key statement.
        """
        table, key, value = self._quoted(options)
        return f'SELECT {value} FROM {table} WHERE {self.key_predicate(key)}'

    @abstractmethod
    def build_set_sql(self, options: 'KeyValueOptions') -> str:
        """Generate the insert-or-overwrite statement.

        Args:
            options: KeyValueOptions with table and column names

        Returns
            str: Upsert SQL taking (key, value) parameters
        """

    def build_delete_sql(self, options: 'KeyValueOptions') -> str:
        """Generate the delete-by-key statement.
        """
        table, key, _ = self._quoted(options)
        return f'DELETE FROM {table} WHERE {key} = {self.get_placeholder_style()}'

    def _insert_sql(self, options: 'KeyValueOptions') -> str:
        """Shared INSERT prefix for the upsert statements."""
        table, key, value = self._quoted(options)
        placeholders = make_placeholders(2, self.dialect_name)
        return f'INSERT INTO {table} ({key}, {value}) VALUES ({placeholders})'

    def create_statement_cursor(self, raw_conn: Any) -> Any:
        """Create the cursor a prepared statement executes on.

        Args:
            raw_conn: Raw DBAPI connection

        Returns
            Cursor dedicated to one statement
        """
        return raw_conn.cursor()

    def check_statement(self, raw_conn: Any, sql: str, param_count: int) -> None:
        """Have the server compile a statement without running it.

        Fails with the driver's error when the table or a column does not
        exist or the statement is otherwise invalid.

        Args:
            raw_conn: Raw DBAPI connection
            sql: Statement text
            param_count: Number of positional parameters in sql
        """
        cursor = raw_conn.cursor()
        try:
            cursor.execute(f'EXPLAIN {sql}', (None,) * param_count)
            cursor.fetchall()
        finally:
            cursor.close()

    def execute_statement(self, cursor: Any, sql: str, params: tuple) -> None:
        """Execute a prepared statement on its cursor.

        Args:
            cursor: Cursor from create_statement_cursor
            sql: Statement text
            params: Positional parameters
        """
        cursor.execute(sql, params)
