import subprocess

import pytest

from twexport.errors import ExtractionError
from twexport.extraction.extractor import LibraryExtractor


class FakeCompleted:
    def __init__(self, returncode):
        self.returncode = returncode


def test_extract_runs_extractor(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda cmd: calls.append(cmd) or FakeCompleted(0))

    LibraryExtractor(i18n_bin="/opt/bin/i18n").extract("/src/lib")

    assert calls == [["/opt/bin/i18n", "extract", "/src/lib"]]


def test_extract_failure_raises(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda cmd: FakeCompleted(3))
    with pytest.raises(ExtractionError, match="status 3"):
        LibraryExtractor(i18n_bin="i18n").extract("lib")


def test_missing_extractor_raises(monkeypatch):
    def boom(cmd):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", boom)
    with pytest.raises(ExtractionError, match="Unable to run extractor"):
        LibraryExtractor(i18n_bin="missing-i18n").extract("lib")


def test_cache_path():
    path = LibraryExtractor(i18n_bin="i18n").cache_path("lib")
    assert path.as_posix() == "lib/.cache/i18n_strings.json"
