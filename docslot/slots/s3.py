import os
import typing as t

from docslot.errors import ImportExtraError


try:
    import boto3
    from botocore.config import Config
    from botocore.exceptions import ClientError
except ImportError:
    raise ImportExtraError("aws", __name__)

from docslot.slots.base import BaseSlot


class S3Slot(BaseSlot):
    """
    Stores each slot as one object in an AWS S3 ``bucket``, under the object key ``prefix + key``. The client honors the
    ``AWS_ENDPOINT`` and ``AWS_REGION`` environment variables, which makes it easy to point at a local S3 emulator.
    """

    def __init__(self, bucket: str, *, prefix: str = "", client=None):
        if client is None:
            client = boto3.client(
                "s3", endpoint_url=os.getenv("AWS_ENDPOINT"), config=Config(region_name=os.getenv("AWS_REGION"))
            )
        self.client = client
        self.bucket = bucket
        self.prefix = prefix

    def object_key(self, key: str) -> str:
        return self.prefix + key

    def get(self, key: str) -> t.Optional[bytes]:
        try:
            res = self.client.get_object(Bucket=self.bucket, Key=self.object_key(key))
        except ClientError as exc:
            if self._is_not_found(exc):
                return None
            raise
        return res["Body"].read()

    def set(self, key: str, data: bytes):
        self.client.put_object(
            Bucket=self.bucket, Key=self.object_key(key), Body=data, ContentType="application/json"
        )

    def clear(self, key: str) -> bool:
        # S3 deletes are idempotent and don't report whether the object existed, so check first.
        try:
            self.client.head_object(Bucket=self.bucket, Key=self.object_key(key))
        except ClientError as exc:
            if self._is_not_found(exc):
                return False
            raise
        self.client.delete_object(Bucket=self.bucket, Key=self.object_key(key))
        return True

    @staticmethod
    def _is_not_found(exc: ClientError) -> bool:
        return exc.response.get("Error", {}).get("Code") in {"NoSuchKey", "404", "NotFound"}
