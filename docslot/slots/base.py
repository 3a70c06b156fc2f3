import typing as t
from abc import ABC, abstractmethod


class BaseSlot(ABC):
    """
    Abstract base class for a synchronous key/value byte store. Each key addresses one slot holding an opaque blob,
    which is always read and written in full.
    """

    @abstractmethod
    def get(self, key: str) -> t.Optional[bytes]:
        """Returns the content stored under ``key``, or ``None`` if nothing has been stored there."""
        pass

    @abstractmethod
    def set(self, key: str, data: bytes):
        """Overwrites the content stored under ``key`` with ``data``, creating the slot if it's not there."""
        pass

    @abstractmethod
    def clear(self, key: str) -> bool:
        """
        Removes the slot stored under ``key``, returning ``True`` if it was removed, and ``False`` if it didn't
        exist.
        """
        pass
