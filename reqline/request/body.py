"""Request body assembly."""

from collections.abc import Iterable

from reqline.request.keyvalue import KeyValue

RequestBody = dict[str, str]
"""JSON object body. Keys keep the order of their first appearance."""


def build_body(pairs: Iterable[KeyValue]) -> RequestBody:
    """
    Fold pairs into a body mapping.

    A repeated key overwrites the earlier value (last write wins).
    """
    body: RequestBody = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body
