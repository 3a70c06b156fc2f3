import typing as t

from docslot.errors import ImportExtraError


try:
    from google.api_core.exceptions import NotFound
    from google.cloud import storage
except ImportError:
    raise ImportExtraError("gcp", __name__)

from docslot.slots.base import BaseSlot


class GCSSlot(BaseSlot):
    """
    Stores each slot as one blob in a Google Cloud Storage ``bucket``, under the blob name ``prefix + key``. The default
    client picks its project and credentials up from the environment, the way all GCP clients do.
    """

    def __init__(self, bucket: str, *, prefix: str = "", client: t.Optional["storage.Client"] = None):
        if client is None:
            client = storage.Client()
        self.bucket = client.bucket(bucket)
        self.prefix = prefix

    def blob_name(self, key: str) -> str:
        return self.prefix + key

    def get(self, key: str) -> t.Optional[bytes]:
        try:
            return self.bucket.blob(self.blob_name(key)).download_as_bytes()
        except NotFound:
            return None

    def set(self, key: str, data: bytes):
        self.bucket.blob(self.blob_name(key)).upload_from_string(data, content_type="application/json")

    def clear(self, key: str) -> bool:
        try:
            self.bucket.blob(self.blob_name(key)).delete()
        except NotFound:
            return False
        return True
