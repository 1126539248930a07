"""
Batch conversion loop for movconvert.

Jobs run strictly one after another. For each job the progress bar ticks in
the background while the encoder blocks the main thread; ticking is always
stopped and joined before the job's result is reported.
"""

import logging
from typing import Callable, List, Optional

from colorama import Fore, Style

from core.encoder import EncoderConfig, convert
from core.models import BatchSummary, ConversionJob, ConversionOutcome, Failure
from utils.error_messages import format_encode_failure
from utils.progress import ProgressTracker


class BatchConverter:
    """Runs a list of conversion jobs and aggregates their outcomes."""

    def __init__(self, encoder_config: EncoderConfig, progress: ProgressTracker,
                 delete_sources: bool = False,
                 convert_func: Optional[Callable[[ConversionJob, EncoderConfig], ConversionOutcome]] = None):
        """
        Initialize the batch converter.

        Args:
            encoder_config: Resolved encoder configuration
            progress: Progress tracker used for the bar and result lines
            delete_sources: Delete each source file after a successful conversion
            convert_func: Encoder invoker (default: core.encoder.convert)
        """
        self.encoder_config = encoder_config
        self.progress = progress
        self.delete_sources = delete_sources
        self.convert_func = convert_func or convert
        self.summary = BatchSummary()

    def run(self, jobs: List[ConversionJob]) -> BatchSummary:
        """
        Convert every job in order.

        Args:
            jobs: Jobs in discovery order

        Returns:
            Summary with one outcome counted per job
        """
        self.summary = BatchSummary(total=len(jobs))
        if not jobs:
            return self.summary

        logging.info(f"Starting batch of {len(jobs)} file(s), delete_sources={self.delete_sources}")
        self.progress.begin(len(jobs))
        try:
            for job in jobs:
                self._process_job(job)
        finally:
            self.progress.stop_ticking()

        self.progress.finish("Conversion complete")
        logging.info(f"Batch finished: {self.summary.succeeded} succeeded, {self.summary.failed} failed")
        return self.summary

    def _invoke(self, job: ConversionJob) -> ConversionOutcome:
        """Call the encoder, turning I/O errors into a Failure."""
        try:
            return self.convert_func(job, self.encoder_config)
        except OSError as e:
            logging.error(f"I/O error converting {job.source_path}: {e}")
            return Failure(diagnostic=str(e))

    def _process_job(self, job: ConversionJob):
        name = job.display_name
        self.progress.set_message(f"Converting: {name}")
        self.progress.start_ticking()
        try:
            outcome = self._invoke(job)
        finally:
            self.progress.stop_ticking()

        self.summary.record(outcome)

        if outcome.ok:
            if self.delete_sources:
                self._delete_source(job)
            self.progress.println(f"{Fore.GREEN}✓{Style.RESET_ALL} Successfully converted: {name}")
        else:
            logging.error(format_encode_failure(job.source_path, outcome.diagnostic))
            self.progress.println(f"{Fore.RED}✗{Style.RESET_ALL} Failed to convert {name}: {outcome.diagnostic}")

        self.progress.advance()

    def _delete_source(self, job: ConversionJob):
        """Remove a converted source file. Failures are reported, never fatal."""
        try:
            job.source_path.unlink()
            self.summary.deleted += 1
            logging.info(f"Deleted source: {job.source_path}")
        except OSError as e:
            self.summary.delete_errors += 1
            logging.warning(f"Could not delete source {job.source_path}: {e}")
            self.progress.println(f"{Fore.YELLOW}!{Style.RESET_ALL} Could not delete {job.display_name}: {e}")


def display_summary(summary: BatchSummary):
    """Print the final counts."""
    print(f"\n{Style.BRIGHT}Summary:{Style.RESET_ALL}")
    print(f"  {Fore.WHITE}{summary.total:>4}{Style.RESET_ALL} {Style.DIM}Total files processed{Style.RESET_ALL}")
    print(f"  {Fore.GREEN}{summary.succeeded:>4}{Style.RESET_ALL} {Style.DIM}Successfully converted{Style.RESET_ALL}")
    print(f"  {Fore.RED}{summary.failed:>4}{Style.RESET_ALL} {Style.DIM}Failed conversions{Style.RESET_ALL}")
    if summary.deleted:
        print(f"  {Fore.CYAN}{summary.deleted:>4}{Style.RESET_ALL} {Style.DIM}Source files deleted{Style.RESET_ALL}")
    if summary.delete_errors:
        print(f"  {Fore.YELLOW}[!] could not delete {summary.delete_errors} source file(s){Style.RESET_ALL}")
