import typing as t
from enum import Enum


ID_FIELD = "_id"
"""The reserved field every stored record carries its identifier under."""

Identifier = t.Union[int, str]
Record = t.Dict[str, t.Any]
Filter = t.Dict[str, t.Any]


class IdMode(Enum):
    """
    The strategy a collection uses to mint identifiers for new records.
    """

    SEQUENTIAL = "sequential"
    """Incrementing integers, starting at 1."""

    RANDOM = "random"
    """Random 128-bit UUIDs, rendered as strings."""
