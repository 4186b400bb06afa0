"""Dataset errors raised by the loading layer."""


class DatasetError(Exception):
    """Dataset could not be loaded."""

    def __init__(self, message: str = "Dataset error"):
        self.message = message
        super().__init__(self.message)


class DatasetUnavailable(DatasetError):
    """No readable source (file missing, remote disabled or unreachable)."""

    def __init__(self, message: str = "Universities dataset unavailable"):
        super().__init__(message)


class DatasetMalformed(DatasetError):
    """Source was read but is not a JSON array of records."""

    def __init__(self, message: str = "Universities dataset malformed"):
        super().__init__(message)
