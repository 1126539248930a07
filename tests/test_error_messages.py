from pathlib import Path

from core.errors import DiscoveryError, EncoderNotFound
from utils import error_messages as em


def test_format_error_with_optional_fields():
    msg = em.format_error(
        what_failed="Operation failed",
        reason="Because reasons",
        action="Do the thing",
        location=Path("/tmp/file.txt"),
        details="More detail",
    )
    assert "ERROR: Operation failed" in msg
    assert "Reason: Because reasons" in msg
    assert "Action: Do the thing" in msg
    assert f"Location: {Path('/tmp/file.txt')}" in msg
    assert "Details: More detail" in msg


def test_format_error_without_optional_fields():
    msg = em.format_error("Bad", "Nope", "Fix it")
    assert "Location:" not in msg
    assert "Details:" not in msg


def test_format_encoder_not_found_lists_locations():
    err = EncoderNotFound("ffmpeg", ["system PATH (ffmpeg)", "bin/ffmpeg/ffmpeg"])
    out = em.format_encoder_not_found(err)
    assert "ERROR: ffmpeg not found" in out
    assert "system PATH (ffmpeg)" in out
    assert "bin/ffmpeg/ffmpeg" in out


def test_format_discovery_error_shows_directory():
    err = DiscoveryError(Path("mov"), "directory does not exist")
    out = em.format_discovery_error(err)
    assert "Cannot read input directory" in out
    assert "Reason: directory does not exist" in out
    assert "Location: mov" in out


def test_format_encode_failure_truncates_long_output():
    out = em.format_encode_failure(Path("mov/clip.mov"), "x" * 600)
    assert "Failed to convert clip.mov" in out
    assert "Details:" in out
    assert out.endswith("...")


def test_format_encode_failure_without_output_has_no_details():
    out = em.format_encode_failure(Path("mov/clip.mov"), "")
    assert "Details:" not in out
