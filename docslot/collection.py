import contextlib
import typing as t

from loguru import logger

from docslot.config import default_slot
from docslot.errors import DataRequiredError, FilterRequiredError
from docslot.identifiers import IdGenerator, make_id_generator
from docslot.matching import matches
from docslot.slots.base import BaseSlot
from docslot.snapshot import SnapshotStore
from docslot.types import ID_FIELD, Filter, Identifier, IdMode, Record


class Collection:
    """
    A single named collection of schema-less records, persisted as one encoded snapshot in a backing slot. Every stored
    record is a ``dict`` carrying a generated ``_id`` field. Each operation loads a fresh snapshot, computes its result
    on it and, for mutations, writes the whole snapshot back. Nothing but the identifier counter is kept in memory
    between calls.

    Example usage:

    >>> books = Collection("books")
    ... books.insert_one({"title": "1984", "author": "George Orwell"})
    ... books.find_one(title="1984")
    {'title': '1984', 'author': 'George Orwell', '_id': '...'}

    Parameters
    ----------
    key : str
        The slot key the collection lives under. Collections with the same key and slot share their data.
    id_mode : IdMode or str, optional
        How identifiers of new records are minted. Defaults to :attr:`IdMode.RANDOM`.
    slot : BaseSlot, optional
        The backing byte store. Defaults to the process-wide slot from :func:`docslot.config.default_slot`.
    read_only : bool
        Whether the collection is read only. Read only collections raise an ``AssertionError`` from every mutating
        operation, and never initialize an absent slot.
    lock : context manager, optional
        If provided, e.g. a ``threading.RLock``, each operation's load, compute and replace cycle runs while holding it.
        Collections are not thread safe without one.
    """

    def __init__(
        self,
        key: str,
        id_mode: t.Union[IdMode, str] = IdMode.RANDOM,
        *,
        slot: t.Optional[BaseSlot] = None,
        read_only=False,
        lock: t.Optional[t.ContextManager] = None,
    ):
        self.key = key
        self.id_mode = IdMode(id_mode)
        self._ids: IdGenerator = make_id_generator(self.id_mode)
        self._read_only = read_only
        self._lock = lock if lock is not None else contextlib.nullcontext()
        self._store = SnapshotStore(slot if slot is not None else default_slot(), key, initialize=not read_only)
        with self._lock:
            # Binds to the slot, initializing it if it's empty.
            self._store.load()

    def find_all(self, filter_: t.Optional[Filter] = None, **where_equals) -> t.List[Record]:
        """
        Retrieves all records which satisfy the optional ``filter_`` and ``**where_equals`` equality conditions, in
        stored order. With no conditions at all, returns the whole collection.
        """
        conditions = self._conditions(filter_, where_equals)
        with self._lock:
            records = self._store.load()
        if conditions is None:
            return records
        return [record for record in records if matches(conditions, record)]

    def find_one(self, filter_: t.Optional[Filter] = None, **where_equals) -> t.Optional[Record]:
        """
        Retrieves the first record, in stored order, which satisfies the ``filter_`` and ``**where_equals`` equality
        conditions, returning ``None`` if there is none. An empty filter matches the first record.
        """
        conditions = self._require_filter(filter_, where_equals, "get")
        with self._lock:
            records = self._store.load()
        return next((record for record in records if matches(conditions, record)), None)

    def insert_one(self, data: t.Optional[Record]) -> Record:
        """Inserts ``data`` as a new record, returning it along with its generated ``_id``."""
        self.assert_can_edit()
        if data is None:
            raise DataRequiredError("insert")
        with self._lock:
            records = self._store.load()
            self._ids.observe(records)
            new_record = self._identify(data)
            records.append(new_record)
            self._store.replace(records)
        logger.debug("inserted record {} into `{}`", new_record[ID_FIELD], self.key)
        return new_record

    def bulk_insert(self, data_list: t.Optional[t.Sequence[Record]]) -> t.List[Record]:
        """
        Inserts each entry of ``data_list`` as a new record, persisting them all at once. Returns the new records in the
        same order as ``data_list``.
        """
        self.assert_can_edit()
        if not data_list:
            raise DataRequiredError("insert")
        with self._lock:
            records = self._store.load()
            self._ids.observe(records)
            new_records = [self._identify(data) for data in data_list]
            records.extend(new_records)
            self._store.replace(records)
        logger.debug("inserted {} records into `{}`", len(new_records), self.key)
        return new_records

    def delete(self, filter_: t.Optional[Filter] = None, **where_equals) -> t.List[Record]:
        """
        Deletes all records which satisfy the ``filter_`` and ``**where_equals`` equality conditions. Returns the
        deleted records, in the order they were stored.
        """
        self.assert_can_edit()
        conditions = self._require_filter(filter_, where_equals, "delete")
        deleted = []
        with self._lock:
            records = self._store.load()
            # Iterate over a copy, so removals don't shift the records still to be visited.
            for record in list(records):
                if matches(conditions, record):
                    index = self._index_of(records, record.get(ID_FIELD))
                    if index is not None:
                        deleted.append(records.pop(index))
            self._store.replace(records)
        logger.debug("deleted {} records from `{}`", len(deleted), self.key)
        return deleted

    def update_one(self, filter_: t.Optional[Filter], data: t.Optional[Record]) -> t.Optional[Record]:
        """
        Merges the fields of ``data`` into the first record which satisfies ``filter_``, leaving its ``_id`` and all
        other fields as they were. Returns the updated record, or ``None`` if no record matched.
        """
        self.assert_can_edit()
        conditions = self._require_filter(filter_, {}, "update")
        changes = self._require_changes(data)
        with self._lock:
            records = self._store.load()
            index = next((i for i, record in enumerate(records) if matches(conditions, record)), None)
            if index is None:
                return None
            records[index] = {**records[index], **changes}
            self._store.replace(records)
        return records[index]

    def update_all(self, filter_: t.Optional[Filter], data: t.Optional[Record]) -> t.List[Record]:
        """
        Merges the fields of ``data`` into every record which satisfies ``filter_``, persisting them all at once.
        Returns the updated records, in the order they are stored.
        """
        self.assert_can_edit()
        conditions = self._require_filter(filter_, {}, "update")
        changes = self._require_changes(data)
        updated = []
        with self._lock:
            records = self._store.load()
            for record in list(records):
                if matches(conditions, record):
                    index = self._index_of(records, record.get(ID_FIELD))
                    if index is not None:
                        records[index] = {**records[index], **changes}
                        updated.append(records[index])
            self._store.replace(records)
        logger.debug("updated {} records in `{}`", len(updated), self.key)
        return updated

    def seed(self, data_list: t.Optional[t.Sequence[Record]]):
        """
        Replaces the entire collection with one freshly identified record per entry of ``data_list``. Everything stored
        before is lost.
        """
        self.assert_can_edit()
        if not data_list:
            raise DataRequiredError("initialize")
        with self._lock:
            self._ids.observe(self._store.load())
            self._store.replace([self._identify(data) for data in data_list])
        logger.info("seeded `{}` with {} records", self.key, len(data_list))

    def assert_can_edit(self):
        """Raises an assertion error if this collection is read only."""
        if self._read_only:
            raise AssertionError("collection is read only")

    def _identify(self, data: Record) -> Record:
        return {**data, ID_FIELD: self._ids.next()}

    @staticmethod
    def _conditions(filter_: t.Optional[Filter], where_equals: t.Dict[str, t.Any]) -> t.Optional[Filter]:
        """Combines the two ways of passing conditions. ``None`` means no conditions were passed at all."""
        if filter_ is None and not where_equals:
            return None
        return {**(filter_ or {}), **where_equals}

    def _require_filter(self, filter_: t.Optional[Filter], where_equals: t.Dict[str, t.Any], operation: str) -> Filter:
        conditions = self._conditions(filter_, where_equals)
        if conditions is None:
            raise FilterRequiredError(operation)
        return conditions

    def _require_changes(self, data: t.Optional[Record]) -> Record:
        if data is None:
            raise DataRequiredError("update")
        if ID_FIELD in data:
            logger.warning("ignoring `{}` field in update data for `{}`, identifiers can't change", ID_FIELD, self.key)
            return {k: v for k, v in data.items() if k != ID_FIELD}
        return data

    @staticmethod
    def _index_of(records: t.List[Record], id_: t.Optional[Identifier]) -> t.Optional[int]:
        return next((i for i, record in enumerate(records) if record.get(ID_FIELD) == id_), None)
