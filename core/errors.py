"""
Fatal error kinds for movconvert.

These abort a run before any job starts. Per-job problems are never raised
past the batch loop; they become Failure outcomes instead.
"""

from pathlib import Path
from typing import List


class ConverterError(Exception):
    """Base class for errors that stop a conversion run."""
    pass


class EncoderNotFound(ConverterError):
    """The encoder binary is neither on PATH nor at the bundled location."""

    def __init__(self, name: str, tried: List[str]):
        self.name = name
        self.tried = list(tried)
        locations = "\n".join(f"  {i}. {loc}" for i, loc in enumerate(self.tried, 1))
        super().__init__(f"{name} binary not found. Looked in:\n{locations}")


class DiscoveryError(ConverterError):
    """The input directory could not be listed."""

    def __init__(self, directory: Path, reason: str):
        self.directory = Path(directory)
        self.reason = reason
        super().__init__(f"Cannot read input directory {self.directory}: {reason}")
