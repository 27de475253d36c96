"""
Unit tests for the key-value statements generated by each strategy.
"""
import pytest
from sqlkv.options import DatabaseOptions, KeyValueOptions
from sqlkv.strategy import MySQLStrategy, PostgresStrategy, SQLiteStrategy
from sqlkv.strategy import get_available_dialects, get_strategy


@pytest.fixture
def options():
    return KeyValueOptions(
        table_name='test_config',
        key_column='key',
        value_column='value',
        max_key_len=8,
        max_value_len=8,
    )


def test_registered_dialects():
    assert set(get_available_dialects()) == {'postgresql', 'sqlite', 'mysql'}
    assert isinstance(get_strategy('sqlite'), SQLiteStrategy)
    assert isinstance(get_strategy('postgresql'), PostgresStrategy)
    assert isinstance(get_strategy('mysql'), MySQLStrategy)


def test_unknown_dialect():
    with pytest.raises(ValueError, match='Unsupported dialect'):
        get_strategy('oracle')


def test_sqlite_statements(options):
    strategy = get_strategy('sqlite')
    assert strategy.build_get_sql(options) == \
        'SELECT "value" FROM "test_config" WHERE "key" = ? COLLATE BINARY'
    assert strategy.build_set_sql(options) == (
        'INSERT INTO "test_config" ("key", "value") VALUES (?, ?) '
        'ON CONFLICT ("key") DO UPDATE SET "value" = excluded."value"')
    assert strategy.build_delete_sql(options) == \
        'DELETE FROM "test_config" WHERE "key" = ?'


def test_postgres_statements(options):
    strategy = get_strategy('postgresql')
    assert strategy.build_get_sql(options) == \
        'SELECT "value" FROM "test_config" WHERE "key" = %s'
    assert strategy.build_set_sql(options) == (
        'INSERT INTO "test_config" ("key", "value") VALUES (%s, %s) '
        'ON CONFLICT ("key") DO UPDATE SET "value" = excluded."value"')
    assert strategy.build_delete_sql(options) == \
        'DELETE FROM "test_config" WHERE "key" = %s'


def test_mysql_statements(options):
    strategy = get_strategy('mysql')
    assert strategy.build_get_sql(options) == \
        'SELECT `value` FROM `test_config` WHERE `key` = CAST(%s AS BINARY)'
    assert strategy.build_set_sql(options) == (
        'INSERT INTO `test_config` (`key`, `value`) VALUES (%s, %s) '
        'ON DUPLICATE KEY UPDATE `value` = VALUES(`value`)')
    assert strategy.build_delete_sql(options) == \
        'DELETE FROM `test_config` WHERE `key` = %s'


def test_identifiers_are_quoted(options):
    options.table_name = 'my"table'
    strategy = get_strategy('postgresql')
    assert 'FROM "my""table"' in strategy.build_get_sql(options)


def test_connection_urls():
    sqlite_options = DatabaseOptions(drivername='sqlite', database='kv.db')
    url = get_strategy('sqlite').build_connection_url(sqlite_options)
    assert url.drivername == 'sqlite'
    assert url.database == 'kv.db'

    pg_options = DatabaseOptions(drivername='postgresql', hostname='h', username='u',
                                 password='p', database='d', port=5432, timeout=10,
                                 appname='tests')
    url = get_strategy('postgresql').build_connection_url(pg_options)
    assert url.drivername == 'postgresql+psycopg'
    assert url.host == 'h'
    assert url.port == 5432
    assert url.query['connect_timeout'] == '10'
    assert url.query['application_name'] == 'tests'

    mysql_options = DatabaseOptions(drivername='mysql', hostname='h', username='u',
                                    password='p', database='d', port=3306, timeout=5)
    strategy = get_strategy('mysql')
    assert strategy.build_connection_url(mysql_options).drivername == 'mysql+mysqlconnector'
    assert strategy.get_engine_kwargs(mysql_options) == {'connect_args': {'connection_timeout': 5}}
