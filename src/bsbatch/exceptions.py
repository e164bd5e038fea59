"""Custom exceptions for bsbatch."""


class BSBatchError(Exception):
    """Base exception for all bsbatch errors."""


class DatasetError(BSBatchError):
    """The option dataset could not be loaded."""


class SourceUnavailableError(DatasetError):
    """The dataset file could not be opened or read."""


class MalformedRecordError(DatasetError):
    """A dataset row has the wrong number of columns or an unparseable field."""

    def __init__(self, line: int, message: str):
        super().__init__(f"line {line}: {message}")
        self.line = line
