"""
Key/value tokens from the command line.

A body field is given as ``key=value``. The token is split on the first
``=`` only, so ``a=b=c`` yields key ``a`` and value ``b=c``. Nothing is
trimmed or unescaped.
"""

from dataclasses import dataclass

from reqline.core.exceptions import MalformedPairError

SEP_DATA = "="


@dataclass(frozen=True)
class KeyValue:
    """A single key=value pair parsed from the command line."""

    key: str
    value: str


def parse_key_value(token: str) -> KeyValue:
    """
    Parse one ``key=value`` token.

    Raises:
        MalformedPairError: If the token has no ``=`` or the key is empty
    """
    key, sep, value = token.partition(SEP_DATA)
    if not sep or not key:
        raise MalformedPairError(token)
    return KeyValue(key=key, value=value)
