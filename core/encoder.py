"""
Encoder invocation for movconvert.
Builds the ffmpeg argument list and runs one conversion synchronously.
"""

import logging
import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from core.models import ConversionJob, ConversionOutcome, Failure, Success


class Platform(Enum):
    """Operating systems with their own hardware-acceleration flags."""
    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    OTHER = "other"


def current_platform() -> Platform:
    """Map sys.platform onto a Platform value."""
    if sys.platform == "darwin":
        return Platform.MACOS
    if sys.platform == "win32":
        return Platform.WINDOWS
    if sys.platform.startswith("linux"):
        return Platform.LINUX
    return Platform.OTHER


# Fixed encode settings
VIDEO_ARGS = ['-c:v', 'libx264', '-preset', 'medium', '-crf', '23']
AUDIO_ARGS = ['-c:a', 'aac', '-b:a', '128k']
THREAD_ARGS = ['-threads', '0']  # 0 lets ffmpeg pick the core count

HWACCEL_FLAGS = {
    Platform.MACOS: ['-hwaccel', 'videotoolbox'],
    Platform.WINDOWS: ['-hwaccel', 'd3d11va'],
    Platform.LINUX: ['-hwaccel', 'auto'],
}


def hwaccel_flags(platform: Platform) -> List[str]:
    """Hardware-decoding flags for platform (empty when unrecognized)."""
    return list(HWACCEL_FLAGS.get(platform, []))


@dataclass(frozen=True)
class EncoderConfig:
    """Resolved encoder executable plus the platform its flags are chosen for."""

    executable: str
    platform: Platform = field(default_factory=current_platform)


def build_arguments(job: ConversionJob, platform: Platform) -> List[str]:
    """
    Build the encoder arguments for one job.

    Order: acceleration flags, input, video settings, audio settings,
    thread count, output path.

    Args:
        job: Job to convert
        platform: Platform selecting the acceleration flags

    Returns:
        Argument list, without the executable
    """
    return [
        *hwaccel_flags(platform),
        '-i', str(job.source_path),
        *VIDEO_ARGS,
        *AUDIO_ARGS,
        *THREAD_ARGS,
        str(job.output_path),
    ]


def format_command(cmd: List[str], platform: Platform) -> str:
    """Quote a command line the way the platform's shell would read it."""
    if platform == Platform.WINDOWS:
        return subprocess.list2cmdline(cmd)
    return shlex.join(cmd)


def convert(job: ConversionJob, config: EncoderConfig,
            runner: Optional[Callable[..., subprocess.CompletedProcess]] = None) -> ConversionOutcome:
    """
    Run the encoder for one job and wait for it to exit.

    The output directory is created first. There is no timeout: a hung
    encoder blocks until it is killed.

    Args:
        job: Job to convert
        config: Resolved encoder configuration
        runner: subprocess.run compatible callable (default: subprocess.run)

    Returns:
        Success on exit status 0, otherwise Failure carrying the stderr text

    Raises:
        OSError: If the output directory cannot be created or the encoder
            cannot be started
    """
    job.output_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = [config.executable, *build_arguments(job, config.platform)]
    logging.info(f"Running: {format_command(cmd, config.platform)}")

    runner = runner or subprocess.run
    result = runner(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )

    if result.returncode == 0:
        logging.info(f"Converted {job.source_path} -> {job.output_path}")
        return Success()

    stderr = result.stderr or b""
    if isinstance(stderr, bytes):
        stderr = stderr.decode('utf-8', errors='replace')
    logging.error(f"Encoder exited with code {result.returncode} for {job.source_path}\nOutput: {stderr}")
    return Failure(diagnostic=stderr)
