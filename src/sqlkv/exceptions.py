"""
Key-value store exception classes.

Driver errors are never wrapped. The tuples at the bottom group each
installed driver's classes so callers can catch them without importing
the drivers; MySQL classes are included when the `mysql` extra is installed.
"""
import sqlite3

import psycopg

try:
    import mysql.connector.errors as mysql_errors
    MYSQL_AVAILABLE = True
except ImportError:
    mysql_errors = None
    MYSQL_AVAILABLE = False


class KeyValueError(Exception):
    """Base class for all key-value store errors.
    """


class ValidationError(KeyValueError):
    """Error in input validation (key or value too long, bad options).
    """


class DecodeError(KeyValueError):
    """Stored payload cannot be decoded into the requested type.
    """


class StoreClosedError(KeyValueError):
    """Operation attempted on a closed store.
    """


def _mysql(*names: str) -> tuple[type[Exception], ...]:
    if mysql_errors is None:
        return ()
    return tuple(getattr(mysql_errors, name) for name in names)


DbConnectionError = (
    psycopg.OperationalError,
    psycopg.InterfaceError,
    sqlite3.OperationalError,
    sqlite3.InterfaceError,
    *_mysql('OperationalError', 'InterfaceError'),
    )

IntegrityError = (
    psycopg.IntegrityError,
    sqlite3.IntegrityError,
    *_mysql('IntegrityError'),
    )

ProgrammingError = (
    psycopg.ProgrammingError,
    psycopg.DatabaseError,
    sqlite3.ProgrammingError,
    sqlite3.DatabaseError,
    *_mysql('ProgrammingError', 'DatabaseError'),
    )

OperationalError = (
    psycopg.OperationalError,
    sqlite3.OperationalError,
    *_mysql('OperationalError'),
    )
