"""
Environment-driven configuration of the backing slot that collections use when they aren't given one explicitly.

========================  ==============  =============================================================
Variable                  Default         Meaning
========================  ==============  =============================================================
``DOCSLOT_BACKEND``       ``memory``      One of ``memory``, ``file``, ``s3`` or ``gcs``.
``DOCSLOT_DATA_DIR``      ``.docslot``    The directory the ``file`` backend stores slots in.
``DOCSLOT_BUCKET``                        The bucket the ``s3`` and ``gcs`` backends store slots in.
``DOCSLOT_PREFIX``                        A prefix for the object names of the ``s3`` and ``gcs`` backends.
========================  ==============  =============================================================
"""
import os
import typing as t
from enum import Enum

from loguru import logger
from pydantic import BaseModel, model_validator

from docslot.slots.base import BaseSlot
from docslot.slots.file import FileSystemSlot
from docslot.slots.memory import InMemorySlot


class Backend(Enum):
    MEMORY = "memory"
    FILE = "file"
    S3 = "s3"
    GCS = "gcs"


class StoreSettings(BaseModel):
    backend: Backend = Backend.MEMORY
    data_dir: str = ".docslot"
    bucket: t.Optional[str] = None
    prefix: str = ""

    @model_validator(mode="after")
    def _check_bucket(self):
        if self.backend in {Backend.S3, Backend.GCS} and not self.bucket:
            raise ValueError(f"the `{self.backend.value}` backend requires a bucket")
        return self

    @classmethod
    def from_env(cls) -> "StoreSettings":
        values = {
            "backend": os.getenv("DOCSLOT_BACKEND"),
            "data_dir": os.getenv("DOCSLOT_DATA_DIR"),
            "bucket": os.getenv("DOCSLOT_BUCKET"),
            "prefix": os.getenv("DOCSLOT_PREFIX"),
        }
        # Unset variables fall back to the field defaults.
        return cls(**{k: v for k, v in values.items() if v is not None})


def make_slot(settings: StoreSettings) -> BaseSlot:
    """Builds the backing slot ``settings`` describes. The cloud backends import their extras lazily."""
    if settings.backend is Backend.FILE:
        return FileSystemSlot(settings.data_dir)
    if settings.backend is Backend.S3:
        from docslot.slots.s3 import S3Slot

        return S3Slot(settings.bucket, prefix=settings.prefix)
    if settings.backend is Backend.GCS:
        from docslot.slots.gcs import GCSSlot

        return GCSSlot(settings.bucket, prefix=settings.prefix)
    return InMemorySlot()


_default_slot: t.Optional[BaseSlot] = None


def default_slot() -> BaseSlot:
    """
    Returns the process-wide slot, creating it from the environment on first use. Every collection constructed without
    an explicit slot shares it, so collections with the same key see the same data.
    """
    global _default_slot
    if _default_slot is None:
        settings = StoreSettings.from_env()
        logger.info("using the `{}` backend as the default slot", settings.backend.value)
        _default_slot = make_slot(settings)
    return _default_slot


def set_default_slot(slot: t.Optional[BaseSlot]):
    """Overrides the process-wide slot. Passing ``None`` makes the next :func:`default_slot` call rebuild it."""
    global _default_slot
    _default_slot = slot
