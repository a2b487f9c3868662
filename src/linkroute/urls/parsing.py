"""Value normalization shared by route variables and query parameters."""

from collections.abc import Iterable, Mapping
from urllib.parse import unquote

from linkroute._internal.types import QueryValues


def normalize_value(value: str, decode_plus_symbols: bool) -> str:
    """Apply global value transformations.

    Replaces ``+`` with a space when *decode_plus_symbols* is true,
    otherwise returns *value* unchanged::

        >>> normalize_value("a+b", True)
        'a b'
        >>> normalize_value("a+b", False)
        'a+b'
    """
    if not decode_plus_symbols:
        return value
    return value.replace("+", " ")


def normalize_query_params(
    params: QueryValues, decode_plus_symbols: bool
) -> dict[str, str | tuple[str, ...]]:
    """Normalize every query value, including each item of a repeated key."""
    normalized: dict[str, str | tuple[str, ...]] = {}
    for key, value in params.items():
        if isinstance(value, tuple):
            normalized[key] = tuple(normalize_value(v, decode_plus_symbols) for v in value)
        else:
            normalized[key] = normalize_value(value, decode_plus_symbols)
    return normalized


def parse_query(query: str) -> dict[str, str | tuple[str, ...]]:
    """Parse a ``key=value&key=value`` string.

    Keys and values are percent-decoded but ``+`` is left intact so
    :func:`normalize_value` decides what it means. A key without ``=``
    maps to ``""``. Repeated keys collect into a tuple in order.
    """
    params: dict[str, str | tuple[str, ...]] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        add_query_value(params, unquote(key), unquote(value))
    return params


def add_query_value(params: dict[str, str | tuple[str, ...]], key: str, value: str) -> None:
    """Store *value* under *key*, turning a repeated key into a tuple."""
    existing = params.get(key)
    if existing is None:
        params[key] = value
    elif isinstance(existing, tuple):
        params[key] = (*existing, value)
    else:
        params[key] = (existing, value)


def merge_query(
    target: dict[str, str | tuple[str, ...]], extra: Mapping[str, str | tuple[str, ...]]
) -> None:
    """Merge *extra* into *target*; shared keys keep every value."""
    for key, value in extra.items():
        values: Iterable[str] = value if isinstance(value, tuple) else (value,)
        for item in values:
            add_query_value(target, key, item)
