"""
Tests for the console entry point

Usage:
    pytest tests/test_main.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run main() in an empty directory without touching global logging."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "configure_logging", lambda debug: None)
    return tmp_path


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    with pytest.raises(SystemExit) as exc_info:
        main.main()
    return exc_info.value.code


def test_bad_stored_delay_exits_with_status_2(workdir, monkeypatch, caplog):
    (workdir / "config.json").write_text(json.dumps({"move_delay_ms": "fast"}), encoding="utf-8")

    assert run_main(monkeypatch) == 2
    assert "move_delay_ms" in caplog.text


def test_bad_disc_count_exits_with_status_2(workdir, monkeypatch, caplog):
    assert run_main(monkeypatch, "--discs", "9", "--delay", "0") == 2
    assert "between 3 and 6" in caplog.text


def test_failed_start_does_not_save_settings(workdir, monkeypatch):
    assert run_main(monkeypatch, "--discs", "2", "--save") == 2
    assert not (workdir / "config.json").exists()
