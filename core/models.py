"""
Data model for movconvert.
Jobs, per-job outcomes and the running batch summary.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionJob:
    """One source file and the output file it converts to."""

    source_path: Path
    output_path: Path

    @classmethod
    def from_source(cls, source: Path, output_dir: Path, target_extension: str) -> 'ConversionJob':
        """
        Build a job for a discovered source file.

        The output keeps the source file name, moved into output_dir and
        with its extension replaced by target_extension.

        Args:
            source: Path to the source file
            output_dir: Directory the converted file is written to
            target_extension: Extension of the converted file (e.g. '.mp4')

        Returns:
            New ConversionJob
        """
        source = Path(source)
        output = (Path(output_dir) / source.name).with_suffix(target_extension)
        return cls(source_path=source, output_path=output)

    @property
    def display_name(self) -> str:
        """File name for progress and result lines (full path if there is no name)."""
        return self.source_path.name or str(self.source_path)


class ConversionOutcome(ABC):
    """Settled result of one encoder invocation."""

    @property
    @abstractmethod
    def ok(self) -> bool:
        """True when the job converted."""


@dataclass(frozen=True)
class Success(ConversionOutcome):
    """The encoder exited with status 0."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(ConversionOutcome):
    """The job failed; diagnostic holds the encoder's stderr or the I/O error."""

    diagnostic: str = ""

    @property
    def ok(self) -> bool:
        return False


@dataclass
class BatchSummary:
    """Counters accumulated over a run."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    deleted: int = 0
    delete_errors: int = 0

    def record(self, outcome: ConversionOutcome):
        """Count one settled outcome."""
        if outcome.ok:
            self.succeeded += 1
        else:
            self.failed += 1

    def is_consistent(self) -> bool:
        """Every job produced exactly one outcome."""
        return self.succeeded + self.failed == self.total
