"""
Fixtures for backend-agnostic key-value contract tests.

This module provides a parametrized fixture that runs each contract test
against every KeyValueStore implementation: the SQLite and PostgreSQL
backed stores and the in-memory store.
"""
import pytest
import sqlkv


@pytest.fixture(params=['sqlite', 'postgresql', 'memory'], ids=['sl', 'pg', 'mem'])
def kv(request, kv_options):
    """Parametrized store with key and value limited to 8 bytes.

    Backends are resolved lazily so a missing PostgreSQL container only
    skips the PostgreSQL run.
    """
    if request.param == 'sqlite':
        return request.getfixturevalue('sl_kv')
    if request.param == 'postgresql':
        return request.getfixturevalue('pg_kv')
    store = sqlkv.MemoryKeyValueStore(kv_options)
    request.addfinalizer(store.close)
    return store
