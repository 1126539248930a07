"""
Pytest configuration and fixtures for movconvert tests.
"""

import threading

import pytest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeTqdm:
    """Stand-in for tqdm that records what would have been drawn."""

    written = []

    def __init__(self, total=None, unit=None, **kwargs):
        self.total = total
        self.unit = unit
        self.n = 0
        self.closed = False
        self.descriptions = []
        self._lock = threading.Lock()

    def set_description_str(self, desc=None, refresh=True):
        with self._lock:
            self.descriptions.append(desc)

    def update(self, n=1):
        self.n += n

    def close(self):
        self.closed = True

    @classmethod
    def write(cls, s, file=None, end="\n", nolock=False):
        cls.written.append(s)


@pytest.fixture
def fake_tqdm(monkeypatch):
    """Replace tqdm in the progress module with FakeTqdm."""
    FakeTqdm.written = []
    monkeypatch.setattr("utils.progress.tqdm", FakeTqdm)
    return FakeTqdm
