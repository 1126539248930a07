import logging

import pytest

from core import logger as core_logger


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_creates_timestamped_file(tmp_path, restore_root_handlers):
    log_file = core_logger.setup_logging(str(tmp_path / "logs"), max_log_files=5)

    logging.info("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("movconvert-")
    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_setup_logging_writes_run_context_header(tmp_path, restore_root_handlers):
    log_file = core_logger.setup_logging(str(tmp_path), max_log_files=5,
                                         context={'input': 'mov/*.mov', 'encoder': '/usr/bin/ffmpeg'})
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "movconvert started" in text
    assert "input: mov/*.mov" in text
    assert "encoder: /usr/bin/ffmpeg" in text


def test_setup_logging_keeps_at_most_max_files(tmp_path, restore_root_handlers):
    for stamp in ("20240101-000000", "20240102-000000", "20240103-000000"):
        (tmp_path / f"movconvert-{stamp}.log").write_text("x")

    log_file = core_logger.setup_logging(str(tmp_path), max_log_files=2)

    remaining = sorted(p.name for p in tmp_path.glob("movconvert-*.log"))
    assert remaining == ["movconvert-20240103-000000.log", log_file.name]


def test_prune_logs_keeps_newest(tmp_path):
    for stamp in ("20240101-000000", "20240102-000000", "20240103-000000"):
        (tmp_path / f"movconvert-{stamp}.log").write_text("x")
    (tmp_path / "other.log").write_text("x")

    assert core_logger.prune_logs(tmp_path, keep=2) == 1

    remaining = sorted(p.name for p in tmp_path.iterdir())
    assert remaining == ["movconvert-20240102-000000.log", "movconvert-20240103-000000.log", "other.log"]


def test_prune_logs_with_nothing_to_remove(tmp_path):
    (tmp_path / "movconvert-20240101-000000.log").write_text("x")
    assert core_logger.prune_logs(tmp_path, keep=5) == 0
