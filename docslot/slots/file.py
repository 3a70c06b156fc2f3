import os
import tempfile
import typing as t
from urllib.parse import quote

from docslot.slots.base import BaseSlot


class FileSystemSlot(BaseSlot):
    """
    Stores each slot as one file inside the ``root`` directory, which is created if needed. Keys are percent-encoded
    into file names, so any key string is safe to use. Writes go to a temporary file first, which then replaces the old
    file, so a reader never observes a partially written slot.
    """

    suffix = ".json"

    def __init__(self, root: str):
        self.root = os.path.abspath(root)
        os.makedirs(self.root, exist_ok=True)

    def path_for(self, key: str) -> str:
        return os.path.join(self.root, quote(key, safe="") + self.suffix)

    def get(self, key: str) -> t.Optional[bytes]:
        path = self.path_for(key)
        if not os.path.isfile(path):
            return None
        with open(path, "rb") as f:
            return f.read()

    def set(self, key: str, data: bytes):
        fd, tmp_path = tempfile.mkstemp(dir=self.root, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, self.path_for(key))
        except BaseException:
            os.remove(tmp_path)
            raise

    def clear(self, key: str) -> bool:
        path = self.path_for(key)
        if not os.path.isfile(path):
            return False
        os.remove(path)
        return True
