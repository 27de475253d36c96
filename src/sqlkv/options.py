from dataclasses import dataclass

from sqlkv.exceptions import ValidationError
from sqlkv.strategy import get_available_dialects, get_strategy_class
from sqlkv.strategy import is_supported_dialect

from libb import ConfigOptions, scriptname

__all__ = [
    'DatabaseOptions',
    'KeyValueOptions',
]


@dataclass
class DatabaseOptions(ConfigOptions):
    """Options

    supported driver names: `postgresql`, `sqlite`, `mysql`

    Connection pooling options:
    - use_pool: Whether to use connection pooling (default: False)
    - pool_max_connections: Maximum connections in pool (default: 5)
    - pool_max_idle_time: Maximum seconds a connection can be idle (default: 300)
    - pool_wait_timeout: Maximum seconds to wait for a connection (default: 30)
    """
    drivername: str = 'postgresql'
    hostname: str = None
    username: str = None
    password: str = None
    database: str = None
    port: int = 0
    timeout: int = 0
    appname: str = None
    # Connection pooling parameters
    use_pool: bool = False
    pool_max_connections: int = 5
    pool_max_idle_time: int = 300
    pool_wait_timeout: int = 30

    def __post_init__(self):
        if not is_supported_dialect(self.drivername):
            available = get_available_dialects()
            raise ValueError(f'drivername must be one of: {available}')
        self.appname = self.appname or scriptname() or 'python_console'
        strategy_cls = get_strategy_class(self.drivername)
        strategy_cls.validate_options(self)


@dataclass
class KeyValueOptions(ConfigOptions):
    """Key-value table shape and limits.

    - table_name: Table holding the records
    - key_column: Unique string column holding the key
    - value_column: Binary-safe column holding the value
    - max_key_len: Maximum key length in bytes
    - max_value_len: Maximum value length in bytes

    No defaults are assumed: every field must be supplied.
    """
    table_name: str = None
    key_column: str = None
    value_column: str = None
    max_key_len: int = None
    max_value_len: int = None

    def __post_init__(self):
        for field in ('table_name', 'key_column', 'value_column'):
            value = getattr(self, field)
            if not isinstance(value, str) or not value:
                raise ValidationError(f'field {field} must be a non-empty string')
        for field in ('max_key_len', 'max_value_len'):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationError(f'field {field} must be a positive integer')
