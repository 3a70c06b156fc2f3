import typing as t

from docslot.slots.base import BaseSlot


class InMemorySlot(BaseSlot):
    """
    A simple in-memory byte store. Its content lives as long as the object does. Useful for testing, or as the
    process-wide default store collections are bound to.
    """

    def __init__(self):
        # Slots can be resolved via `self._db[key]`.
        self._db: t.Dict[str, bytes] = {}

    def get(self, key: str) -> t.Optional[bytes]:
        return self._db.get(key)

    def set(self, key: str, data: bytes):
        self._db[key] = bytes(data)

    def clear(self, key: str) -> bool:
        if key in self._db:
            del self._db[key]
            return True
        return False
