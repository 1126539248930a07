"""
Source file discovery for movconvert.
Scans the input directory for files with the source extension.
"""

import logging
from pathlib import Path
from typing import List

from core.errors import DiscoveryError
from core.models import ConversionJob


def find_source_files(input_dir: Path, source_extension: str) -> List[Path]:
    """
    List regular files in input_dir whose extension matches source_extension.

    Matching is case-insensitive. Subdirectories and entries that cannot be
    inspected are skipped. The result is sorted by file name.

    Args:
        input_dir: Directory to scan (not recursive)
        source_extension: Extension to match, with leading dot (e.g. '.mov')

    Returns:
        Sorted list of matching file paths (possibly empty)

    Raises:
        DiscoveryError: If input_dir itself cannot be listed
    """
    input_dir = Path(input_dir)
    wanted = source_extension.lower()

    try:
        entries = list(input_dir.iterdir())
    except FileNotFoundError:
        raise DiscoveryError(input_dir, "directory does not exist")
    except NotADirectoryError:
        raise DiscoveryError(input_dir, "not a directory")
    except OSError as e:
        raise DiscoveryError(input_dir, e.strerror or str(e))

    matches = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
        except OSError as e:
            logging.warning(f"Skipping unreadable entry {entry}: {e}")
            continue

        if entry.suffix.lower() == wanted:
            matches.append(entry)

    matches.sort(key=lambda p: p.name)
    logging.info(f"Discovered {len(matches)} {wanted} file(s) in {input_dir}")
    return matches


def discover_jobs(input_dir: Path, output_dir: Path, source_extension: str,
                  target_extension: str) -> List[ConversionJob]:
    """Build one ConversionJob per discovered source file, in discovery order."""
    return [
        ConversionJob.from_source(path, Path(output_dir), target_extension)
        for path in find_source_files(input_dir, source_extension)
    ]
