class DocslotError(Exception):
    """Base class for all errors raised by this package."""


class FilterRequiredError(DocslotError):
    """An operation which needs a filter to select records was called without one."""

    def __init__(self, operation: str):
        super().__init__(f"Missing filter not allowed, please provide filter criteria to {operation} the data.")


class DataRequiredError(DocslotError):
    """An operation which writes records was called without any data to write."""

    def __init__(self, operation: str):
        super().__init__(f"Please provide data to {operation}!")


class SnapshotDecodeError(DocslotError):
    """The content of a backing slot is not an encoded sequence of records."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"slot `{key}` does not hold a valid record snapshot: {reason}")
        self.key = key


class ImportExtraError(ImportError):
    """A needed package extra has not been installed."""

    def __init__(self, extra_name: str, feature_name: str):
        super().__init__(f"The `{extra_name}` package extra is required to use `{feature_name}`.")
