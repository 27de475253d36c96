import sqlite3

import psycopg
import pytest
import sqlkv


def test_store_errors_share_a_base():
    for cls in (sqlkv.ValidationError, sqlkv.DecodeError, sqlkv.StoreClosedError):
        assert issubclass(cls, sqlkv.KeyValueError)


def test_driver_groups_cover_sqlite_and_postgres():
    assert sqlite3.IntegrityError in sqlkv.IntegrityError
    assert psycopg.IntegrityError in sqlkv.IntegrityError
    assert sqlite3.OperationalError in sqlkv.OperationalError
    assert psycopg.InterfaceError in sqlkv.DbConnectionError
    assert psycopg.ProgrammingError in sqlkv.ProgrammingError


def test_driver_groups_cover_mysql():
    errors = pytest.importorskip('mysql.connector.errors')
    assert errors.IntegrityError in sqlkv.IntegrityError
    assert errors.OperationalError in sqlkv.OperationalError
    assert errors.InterfaceError in sqlkv.DbConnectionError
    assert errors.ProgrammingError in sqlkv.ProgrammingError


def test_sqlite_constraint_violation_is_caught_by_group(sl_conn):
    with pytest.raises(sqlkv.IntegrityError):
        sl_conn.execute('INSERT INTO test_config VALUES (?, ?)', 'k', None)
