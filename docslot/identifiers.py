import typing as t
import uuid
from abc import ABC, abstractmethod

from docslot.types import ID_FIELD, Identifier, IdMode, Record


class IdGenerator(ABC):
    """Mints identifiers for the records of a single collection instance."""

    @abstractmethod
    def next(self) -> Identifier:
        pass

    def observe(self, records: t.Iterable[Record]):
        """
        Lets the generator see the records currently persisted in the collection before it mints new identifiers for
        it. The default implementation does nothing.
        """
        pass


class SequentialIdGenerator(IdGenerator):
    """
    Hands out ``1, 2, 3, ...``. The counter lives only as long as the generator does, so before minting, the collection
    calls :meth:`observe` with its snapshot, which moves the counter past the largest integer identifier already
    persisted. That keeps identifiers unique when a collection is reopened, or when another instance bound to the same
    key has inserted records in the meantime.
    """

    def __init__(self, start: int = 0):
        self._last = start

    @property
    def last(self) -> int:
        """The most recently issued (or observed) identifier, ``0`` if there is none."""
        return self._last

    def next(self) -> int:
        self._last += 1
        return self._last

    def observe(self, records: t.Iterable[Record]):
        for record in records:
            id_ = record.get(ID_FIELD)
            # `bool` is a subclass of `int`, but `True` is not an identifier.
            if isinstance(id_, int) and not isinstance(id_, bool) and id_ > self._last:
                self._last = id_


class RandomIdGenerator(IdGenerator):
    """Hands out random UUID4 strings. Collisions are negligible, so persisted records don't need to be observed."""

    def next(self) -> str:
        return str(uuid.uuid4())


def make_id_generator(mode: t.Union[IdMode, str]) -> IdGenerator:
    if isinstance(mode, str):
        # Validate mode.
        mode = IdMode(mode)
    if mode is IdMode.SEQUENTIAL:
        return SequentialIdGenerator()
    return RandomIdGenerator()
