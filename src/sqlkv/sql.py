"""
SQL helpers shared by the dialect strategies.

- `quote_identifier()` - Quote table/column names
- `make_placeholders()` - Build a positional placeholder list
- `standardize_placeholders()` - Convert %s <-> ? for a dialect
"""
import re

_QMARK = re.compile(r"('(?:[^']|'')*')|\?")
_PERCENT_S = re.compile(r"('(?:[^']|'')*')|%s")


def _dialect_placeholder(dialect: str) -> str:
    """Return the positional placeholder marker for a dialect."""
    return '?' if dialect == 'sqlite' else '%s'


def quote_identifier(identifier: str, dialect: str = 'postgresql') -> str:
    """Safely quote database identifiers.

    Parameters
        identifier: Table or column name
        dialect: Database dialect

    Returns
        Quoted identifier

    Raises
        ValueError: If dialect is unsupported or identifier is empty
    """
    if not identifier:
        raise ValueError('identifier cannot be empty')

    if dialect in {'postgresql', 'sqlite'}:
        return '"' + identifier.replace('"', '""') + '"'

    if dialect == 'mysql':
        return '`' + identifier.replace('`', '``') + '`'

    raise ValueError(f'Unknown dialect: {dialect}')


def make_placeholders(count: int, dialect: str = 'postgresql') -> str:
    """Return `count` comma separated placeholders for a dialect.
    """
    return ', '.join([_dialect_placeholder(dialect)] * count)


def standardize_placeholders(sql: str, dialect: str = 'postgresql') -> str:
    """Convert positional placeholders to the dialect's style.

    Placeholders inside string literals are left alone.
    """
    if not sql:
        return sql

    if dialect == 'sqlite':
        pattern, marker = _PERCENT_S, '?'
    else:
        pattern, marker = _QMARK, '%s'

    return pattern.sub(lambda m: m.group(1) or marker, sql)
