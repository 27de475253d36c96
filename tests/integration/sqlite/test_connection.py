import sqlkv
from sqlkv.connection import dispose_all_engines, get_engine_for_options
from sqlkv.options import DatabaseOptions

import config


def test_connect_from_config():
    cn = sqlkv.connect('sqlite', config=config)
    try:
        assert cn.dialect == 'sqlite'
        assert not cn.is_pooled
        assert cn.dbapi_connection.driver_connection.isolation_level is None
    finally:
        cn.close()
    assert cn.closed


def test_execute_tracks_calls():
    with sqlkv.connect({'drivername': 'sqlite', 'database': ':memory:'}) as cn:
        cn.execute('CREATE TABLE t (a INTEGER)')
        assert cn.execute('INSERT INTO t VALUES (%s), (?)', 1, 2) == 2
        assert cn.calls == 2
        assert cn.time > 0


def test_engine_registry_reuses_engines():
    options = DatabaseOptions(drivername='sqlite', database=':memory:')
    other = DatabaseOptions(drivername='sqlite', database='other.db')
    try:
        first = get_engine_for_options(options)
        assert get_engine_for_options(options) is first
        assert get_engine_for_options(other) is not first
    finally:
        dispose_all_engines()

    assert get_engine_for_options(options) is not first
