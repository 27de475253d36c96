"""
Key-value contract tests run against every store implementation.
"""
import pytest
import sqlkv
from sqlkv.types import UINT64_MAX


def test_set_does_not_return_an_error(kv):
    assert kv.set('foo', 'bar') is None


def test_get_after_set_returns_the_value(kv):
    kv.set('foo', 'bar')
    assert kv.get('foo') == 'bar'


def test_get_non_existing_returns_empty_string(kv):
    assert kv.get('missing') == ''


def test_delete_non_existing_is_not_an_error(kv):
    assert kv.delete('missing') is None


def test_delete_deletes_the_value(kv):
    kv.set('foo', 'bar')
    kv.delete('foo')
    assert kv.get('foo') == ''


def test_second_set_overwrites_original_value(kv):
    kv.set('foo', 'original')
    kv.set('foo', 'new')
    assert kv.get('foo') == 'new'


def test_set_is_idempotent(kv):
    kv.set('foo', 'bar')
    kv.set('foo', 'bar')
    assert kv.get('foo') == 'bar'


def test_long_key_fails(kv):
    with pytest.raises(sqlkv.ValidationError):
        kv.set('123456789', 'bar')
    assert kv.get('12345678') == ''


def test_long_value_fails_and_leaves_value_unchanged(kv):
    kv.set('foo', 'bar')
    with pytest.raises(sqlkv.ValidationError):
        kv.set('foo', '123456789')
    assert kv.get('foo') == 'bar'


def test_limits_are_inclusive(kv):
    kv.set('12345678', '87654321')
    assert kv.get('12345678') == '87654321'


def test_binary_value(kv):
    kv.set('blob', b'\x00\xff\x10')
    assert kv.get_bytes('blob') == b'\x00\xff\x10'


def test_keys_are_case_sensitive(kv):
    kv.set('Foo', 'upper')
    assert kv.get('foo') == ''
    kv.set('foo', 'lower')
    assert kv.get('Foo') == 'upper'
    assert kv.get('foo') == 'lower'


@pytest.mark.parametrize('value', [0, 1, 2 ** 32 + 7, 2 ** 63, UINT64_MAX])
def test_uint64_round_trip(kv, value):
    kv.set_uint64('n', value)
    assert kv.get_uint64('n') == value
    assert kv.get_bytes('n') == value.to_bytes(8, 'little')


def test_uint64_of_unset_key_is_zero(kv):
    assert kv.get_uint64('missing') == 0


def test_uint64_overwrites(kv):
    kv.set_uint64('n', 1)
    kv.set_uint64('n', 2)
    assert kv.get_uint64('n') == 2


@pytest.mark.parametrize('payload', [b'', b'abc', b'\x00' * 9], ids=['empty', 'short', 'long'])
def test_uint64_of_wrong_length_value_fails(kv, payload):
    kv.max_value_len = 9
    kv.set('n', payload)
    with pytest.raises(sqlkv.DecodeError):
        kv.get_uint64('n')


def test_uint64_of_text_value_fails(kv):
    kv.set('n', 'abc')
    with pytest.raises(sqlkv.DecodeError):
        kv.get_uint64('n')


def test_uint64_out_of_range_fails(kv):
    with pytest.raises(sqlkv.ValidationError):
        kv.set_uint64('n', -1)
    assert kv.get_uint64('n') == 0


def test_scenario(kv):
    with pytest.raises(sqlkv.ValidationError):
        kv.set('123456789', 'bar')

    kv.set('foo', 'bar')
    assert kv.get('foo') == 'bar'

    kv.set('foo', 'new')
    assert kv.get('foo') == 'new'

    kv.delete('foo')
    assert kv.get('foo') == ''


def test_get_of_binary_value_fails(kv):
    kv.set_uint64('n', 2 ** 64 - 1)
    with pytest.raises(sqlkv.DecodeError):
        kv.get('n')
