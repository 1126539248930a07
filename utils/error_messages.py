"""
User-facing error text for movconvert.

Every message has the same shape so fatal errors, config problems and
per-file failures read alike in the console and in the log:

  ERROR: <what failed>
    Reason: <why>
    Action: <what to do>
    Location: <path, optional>
    Details: <extra text, optional>
"""

from pathlib import Path
from typing import Optional

from core.errors import DiscoveryError, EncoderNotFound

MAX_DETAILS_LENGTH = 500


def format_error(what_failed: str, reason: str, action: str,
                 location: Optional[Path] = None, details: Optional[str] = None) -> str:
    """Render one error block; location and details lines are omitted when empty."""
    fields = [("Reason", reason), ("Action", action), ("Location", location), ("Details", details)]
    lines = [f"ERROR: {what_failed}"]
    lines.extend(f"  {label}: {value}" for label, value in fields if value)
    return "\n".join(lines)


def _truncate(text: str) -> str:
    text = text.strip()
    if len(text) > MAX_DETAILS_LENGTH:
        return text[:MAX_DETAILS_LENGTH] + "..."
    return text


def format_encoder_not_found(error: EncoderNotFound) -> str:
    """Format the missing-encoder error with every location tried."""
    return format_error(
        what_failed=f"{error.name} not found",
        reason="Tried: " + "; ".join(error.tried),
        action=f"Install {error.name} and add it to PATH, or place it at {error.tried[-1]}"
    )


def format_discovery_error(error: DiscoveryError) -> str:
    """Format an unreadable input directory error."""
    return format_error(
        what_failed="Cannot read input directory",
        reason=error.reason,
        action="Create the directory and put the files to convert in it",
        location=error.directory
    )


def format_encode_failure(source: Path, diagnostic: str) -> str:
    """Format a per-file encode failure, truncating long encoder output."""
    details = _truncate(diagnostic) if diagnostic else None
    return format_error(
        what_failed=f"Failed to convert {Path(source).name}",
        reason="Encoder exited with an error",
        action="Check that the file plays and is not still being written",
        location=Path(source).parent,
        details=details
    )
