"""
Prepared statements for the key-value store.

A PreparedStatement binds one statement text to its own cursor. The
statement is compiled by the server when it is created, so an invalid
table or column fails early, and every later execution reuses the cursor
(and on PostgreSQL and MySQL the server-side plan) until close().
"""
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlkv.strategy import DatabaseStrategy

logger = logging.getLogger(__name__)


class PreparedStatement:
    """A statement text bound to a dedicated cursor.
    """

    def __init__(self, strategy: 'DatabaseStrategy', raw_conn: Any, sql: str,
                 param_count: int) -> None:
        strategy.check_statement(raw_conn, sql, param_count)
        self.strategy = strategy
        self.sql = sql
        self.param_count = param_count
        self.cursor = strategy.create_statement_cursor(raw_conn)
        self.calls = 0
        logger.debug(f'Prepared statement: {sql}')

    def __repr__(self) -> str:
        return f'PreparedStatement({self.sql!r})'

    def execute(self, *params: Any) -> int:
        """Execute the statement and return the affected row count.
        """
        assert len(params) == self.param_count, \
            f'Expected {self.param_count} parameters, got {len(params)}'
        self.strategy.execute_statement(self.cursor, self.sql, params)
        self.calls += 1
        return self.cursor.rowcount

    def query_value(self, *params: Any) -> Any | None:
        """Execute the statement and return the first column of the first row.

        Returns None when the statement produced no rows.
        """
        self.execute(*params)
        rows = self.cursor.fetchall()
        if not rows:
            return None
        return rows[0][0]

    def close(self) -> None:
        """Release the statement's cursor.
        """
        self.cursor.close()
        logger.debug(f'Closed statement after {self.calls} executions: {self.sql}')
