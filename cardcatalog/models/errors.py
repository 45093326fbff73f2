"""
Catalog error hierarchy.

Load failures (missing source, malformed JSON) are caught at the loader
boundary and reported as a boolean outcome. Cache-not-ready is raised by
queries and surfaced to clients as 503.
"""

from pathlib import Path


class DatasetLoadError(Exception):
    """Base class for failures while reading a dataset source."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(message)


class SourceUnavailableError(DatasetLoadError):
    """Source file is missing or unreadable."""


class DatasetParseError(DatasetLoadError):
    """Source file is not a JSON array of objects."""


class CacheNotReadyError(Exception):
    """
    A query arrived before the dataset it reads was ever loaded.

    Attributes:
        dataset: Name of the empty slot ("cards" or "sets")
        message: Optional human-readable hint for the client
    """

    def __init__(self, dataset: str, message: str | None = None):
        self.dataset = dataset
        self.message = message
        super().__init__(f"{dataset} dataset not loaded")
