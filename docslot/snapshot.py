r"""
Reads and replaces the full record sequence a collection keeps in its backing slot. There is no partial write path:
every mutation re-encodes and rewrites the whole collection, which is :math:`\mathcal{O}(n)` per write but keeps each
operation self-contained.
"""
import typing as t

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from docslot.errors import SnapshotDecodeError
from docslot.slots.base import BaseSlot
from docslot.types import Record


class SnapshotCodec:
    """
    Encodes an ordered sequence of records to UTF-8 JSON bytes and back. Field values and their types (numbers, strings,
    booleans, nulls, nested objects and arrays) and the order of the records all survive the round trip.
    """

    _adapter = TypeAdapter(t.List[t.Dict[str, t.Any]])

    def encode(self, records: t.Sequence[Record]) -> bytes:
        return self._adapter.dump_json(list(records))

    def decode(self, data: t.Union[str, bytes], *, key: str = "") -> t.List[Record]:
        try:
            return self._adapter.validate_json(data)
        except ValidationError as exc:
            raise SnapshotDecodeError(key, f"{exc.error_count()} validation error(s), first: {exc.errors()[0]['msg']}")


class SnapshotStore:
    """
    Binds a backing ``slot`` and a ``key`` together, materializing the collection stored there.

    Parameters
    ----------
    slot : BaseSlot
        The byte store holding the encoded collection.
    key : str
        The slot key the collection lives under.
    initialize : bool
        Whether :meth:`load` should write an empty sequence into the slot when it finds none there. A store that
        doesn't initialize just reads an absent slot as an empty collection.
    """

    def __init__(self, slot: BaseSlot, key: str, *, codec: t.Optional[SnapshotCodec] = None, initialize=True):
        self.slot = slot
        self.key = key
        self.codec = codec or SnapshotCodec()
        self._initialize = initialize

    def load(self) -> t.List[Record]:
        """Returns a freshly decoded copy of the full collection."""
        data = self.slot.get(self.key)
        if data is None:
            if self._initialize:
                logger.info("initializing empty collection in slot `{}`", self.key)
                self.slot.set(self.key, self.codec.encode([]))
            return []
        records = self.codec.decode(data, key=self.key)
        logger.debug("loaded {} record(s) from slot `{}`", len(records), self.key)
        return records

    def replace(self, records: t.Sequence[Record]):
        """Overwrites the full collection with ``records``."""
        self.slot.set(self.key, self.codec.encode(records))
        logger.debug("replaced slot `{}` with {} record(s)", self.key, len(records))
