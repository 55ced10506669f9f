"""Exceptions raised while reading AIS navigation logs."""


class FormatError(ValueError):
    """Input paths are missing, have an unsupported extension or mix formats."""


class DataQualityFault(ValueError):
    """A single sentence cannot be parsed into the expected shape.

    Raised at row level and absorbed by the stage that handles it; only the
    aggregate effect (fewer records) is visible to callers.
    """

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line
