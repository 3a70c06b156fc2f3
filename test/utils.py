import typing as t

from docslot.slots.memory import InMemorySlot


BOOKS = [
    {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald"},
    {"title": "Moby", "author": "Herman Melville"},
    {"title": "War and Peace", "author": "Leo Tolstoy"},
    {"title": "The Catcher in the Rye", "author": "J.D. Salinger"},
    {"title": "To Kill a Mockingbird", "author": "Harper Lee"},
]


def without_ids(records: t.List[dict]) -> t.List[dict]:
    return [{k: v for k, v in record.items() if k != "_id"} for record in records]


class CountingSlot(InMemorySlot):
    """An in-memory slot which keeps track of how often it was read and written."""

    def __init__(self):
        super().__init__()
        self.get_count = 0
        self.set_count = 0

    def get(self, key: str) -> t.Optional[bytes]:
        self.get_count += 1
        return super().get(key)

    def set(self, key: str, data: bytes):
        self.set_count += 1
        super().set(key, data)

    def reset(self):
        self.get_count = 0
        self.set_count = 0
