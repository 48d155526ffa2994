"""
Tests for the background solve worker

The worker's run() is called directly in the test thread, so every
signal is delivered synchronously and no event loop is needed.

Usage:
    pytest tests/test_solver_worker.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from PyQt5.QtCore import QCoreApplication

from hanoi_sim.engine import PuzzleEngine
from hanoi_sim.solver_worker import SolveWorker


@pytest.fixture(scope="module")
def qt_app():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


def make_worker(engine, **kwargs):
    """Create a worker and record everything it emits."""
    worker = SolveWorker(engine, move_delay_ms=0, **kwargs)
    events = {"moves": [], "progress": [], "status": [], "finished": [], "errors": []}

    worker.move_made.connect(lambda move: events["moves"].append(move))
    worker.progress_changed.connect(lambda value: events["progress"].append(value))
    worker.status_changed.connect(lambda text: events["status"].append(text))
    worker.solution_finished.connect(lambda done: events["finished"].append(done))
    worker.error_occurred.connect(lambda msg: events["errors"].append(msg))
    return worker, events


def test_worker_solves_puzzle(qt_app):
    print("\n" + "=" * 60)
    print("TEST: SolveWorker")
    print("=" * 60)

    engine = PuzzleEngine(4)
    worker, events = make_worker(engine)

    worker.run()

    print(f"  Moves emitted: {len(events['moves'])}")
    assert [m.sequence_number for m in events["moves"]] == list(range(1, 16))
    assert events["moves"] == engine.history
    assert events["progress"][-1] == 1.0
    assert events["status"] == ["Running", "Solved"]
    assert events["finished"] == [True]
    assert events["errors"] == []
    assert engine.is_completed()
    assert not engine.is_in_progress()
    assert not worker.is_running()


def test_worker_resets_before_solving(qt_app):
    engine = PuzzleEngine(3)
    engine.move_disc("A", "B")
    worker, events = make_worker(engine)

    worker.run()

    assert engine.move_count == 7
    assert events["finished"] == [True]


def test_worker_without_reset_on_solved_puzzle(qt_app):
    engine = PuzzleEngine(3)
    engine.start_auto_solution()
    worker, events = make_worker(engine, reset_first=False)

    worker.run()

    # Only the smallest disc is free: it goes round C -> B -> A -> C
    assert [m.sequence_number for m in events["moves"]] == [8, 9, 10]
    assert [m.pegs for m in events["moves"]] == [("C", "B"), ("B", "A"), ("A", "C")]
    assert engine.move_count == 10
    assert engine.is_completed()
    assert events["finished"] == [True]


def test_worker_stop_mid_solution(qt_app):
    engine = PuzzleEngine(5)
    worker, events = make_worker(engine)

    def stop_after_three(move):
        if move.sequence_number == 3:
            worker.request_stop()

    worker.move_made.connect(stop_after_three)
    worker.run()

    assert engine.move_count == 3
    assert not engine.is_in_progress()
    assert not engine.is_completed()
    assert events["status"] == ["Running", "Stopped"]
    assert events["finished"] == [False]
    assert engine.snapshot() == ((5, 4, 3), (2, 1), ())

    # The engine is usable afterwards
    engine.reset()
    engine.start_auto_solution()
    assert engine.move_count == 31


def test_worker_reports_errors(qt_app):
    engine = PuzzleEngine(3)

    def broken_display(move):
        raise RuntimeError("display gone")

    engine.observer = broken_display
    worker, events = make_worker(engine)

    worker.run()

    assert events["errors"] == ["display gone"]
    assert events["finished"] == [False]
    assert not engine.is_in_progress()
    assert engine.move_count == 1


def test_worker_rejects_negative_delay(qt_app):
    with pytest.raises(ValueError):
        SolveWorker(PuzzleEngine(3), move_delay_ms=-1)
