"""
Run log for movconvert.

Each run writes one timestamped file under the log folder. The first lines
record the settings the batch runs with, so a failed conversion can be
traced back without rerunning.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

LOG_PREFIX = 'movconvert'
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(log_folder: str = 'logs', max_log_files: int = 5,
                  context: Optional[Dict[str, Any]] = None) -> Path:
    """
    Open a fresh log file for this run and attach it to the root logger.

    Args:
        log_folder: Directory to store log files
        max_log_files: Log files kept, including the new one
        context: Run settings written as the log header

    Returns:
        Path to the current log file
    """
    folder = Path(log_folder)
    folder.mkdir(parents=True, exist_ok=True)
    prune_logs(folder, keep=max_log_files - 1)

    log_file = folder / f"{LOG_PREFIX}-{datetime.now():%Y%m%d-%H%M%S}.log"
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(handler)

    logging.info("=" * 70)
    logging.info(f"{LOG_PREFIX} started, log file: {log_file}")
    for key, value in (context or {}).items():
        logging.info(f"  {key}: {value}")
    return log_file


def prune_logs(folder: Path, keep: int) -> int:
    """
    Delete the oldest run logs so at most `keep` remain.

    Returns:
        Number of files removed
    """
    logs = sorted(Path(folder).glob(f"{LOG_PREFIX}-*.log"))
    stale = logs[:max(len(logs) - max(keep, 0), 0)]
    removed = 0
    for path in stale:
        try:
            path.unlink()
            removed += 1
        except OSError as e:
            logging.warning(f"Could not remove old log file {path.name}: {e}")
    return removed
