"""
A minimal embedded document store. A :class:`~docslot.collection.Collection` is a single named collection of
schema-less records, persisted as one encoded snapshot in a synchronously read and written backing slot (see
:mod:`docslot.slots`). Supports inserting, retrieving, updating and deleting records by `WHERE equals` style partial
matches.
"""
from docslot.collection import Collection
from docslot.errors import DataRequiredError, DocslotError, FilterRequiredError, SnapshotDecodeError
from docslot.types import IdMode


__all__ = ["Collection", "DataRequiredError", "DocslotError", "FilterRequiredError", "IdMode", "SnapshotDecodeError"]
