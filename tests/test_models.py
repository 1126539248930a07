from pathlib import Path

import pytest

from core.models import BatchSummary, ConversionJob, ConversionOutcome, Failure, Success


def test_job_output_path_moves_dir_and_replaces_extension():
    job = ConversionJob.from_source(Path("mov/Holiday.MOV"), Path("mp4"), ".mp4")
    assert job.source_path == Path("mov/Holiday.MOV")
    assert job.output_path == Path("mp4/Holiday.mp4")


def test_job_output_path_keeps_inner_dots():
    job = ConversionJob.from_source(Path("mov/a.b.c.mov"), Path("out"), ".mp4")
    assert job.output_path == Path("out/a.b.c.mp4")


def test_display_name_is_file_name_only():
    job = ConversionJob.from_source(Path("/data/mov/clip.mov"), Path("/data/mp4"), ".mp4")
    assert job.display_name == "clip.mov"


def test_display_name_falls_back_to_full_path():
    job = ConversionJob(source_path=Path("/"), output_path=Path("/out.mp4"))
    assert job.display_name == str(Path("/"))


def test_outcomes_are_plain_values():
    assert Success().ok is True
    failure = Failure("bad codec")
    assert failure.ok is False
    assert failure.diagnostic == "bad codec"
    assert Failure("x") == Failure("x")


def test_summary_record_counts_each_outcome_once():
    summary = BatchSummary(total=3)
    summary.record(Success())
    summary.record(Failure("boom"))
    assert not summary.is_consistent()
    summary.record(Success())
    assert (summary.succeeded, summary.failed) == (2, 1)
    assert summary.is_consistent()


def test_outcome_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ConversionOutcome()
    assert isinstance(Success(), ConversionOutcome)
    assert isinstance(Failure("x"), ConversionOutcome)
