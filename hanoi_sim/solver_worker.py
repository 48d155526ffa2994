"""
Solver Worker Module for the Towers of Hanoi Simulator

Provides a background QThread that plays the auto-solution on a
PuzzleEngine one move at a time, pacing the moves so a display can
follow along. Communicates with the UI via Qt signals for thread-safe
updates.
"""

import logging

from PyQt5.QtCore import QThread, pyqtSignal

from hanoi_sim.engine import PuzzleEngine


# Configure module logger
logger = logging.getLogger(__name__)


class SolveWorker(QThread):
    """
    Background worker thread for the auto-solution.

    The engine itself never sleeps or touches threads; this worker
    owns the pacing and the stop request. Stopping mid-solution leaves
    the engine in whatever legal partial state it had reached.

    Signals:
        status_changed(str): Emitted when worker status changes
        move_made(object): Emitted with each Move, in order
        progress_changed(float): Emitted with engine.progress() after each move
        solution_finished(bool): Emitted when the run ends (True if solved)
        error_occurred(str): Emitted when an error occurs

    Example:
        worker = SolveWorker(engine, move_delay_ms=250)
        worker.move_made.connect(view.show_move)
        worker.solution_finished.connect(view.show_result)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    # Signals for UI updates (thread-safe)
    status_changed = pyqtSignal(str)
    move_made = pyqtSignal(object)
    progress_changed = pyqtSignal(float)
    solution_finished = pyqtSignal(bool)
    error_occurred = pyqtSignal(str)

    DEFAULT_MOVE_DELAY_MS = 500

    def __init__(self, engine: PuzzleEngine, move_delay_ms: int = DEFAULT_MOVE_DELAY_MS,
                 reset_first: bool = True):
        """
        Initialize the solve worker.

        Args:
            engine: Puzzle to solve. Must not be driven by anyone else
                while the worker runs.
            move_delay_ms: Pause after each move (0 disables pacing)
            reset_first: Reset the puzzle before solving
        """
        super().__init__()
        if move_delay_ms < 0:
            raise ValueError(f"Move delay must be non-negative, got {move_delay_ms}")
        self.engine = engine
        self.move_delay_ms = move_delay_ms
        self.reset_first = reset_first
        self._running = False
        self._stop_requested = False

    def run(self):
        """
        Worker body. Called when thread starts.

        Plays the auto-solution move by move and emits a signal per
        move until the puzzle is solved or a stop is requested.
        """
        self._running = True
        self._stop_requested = False
        completed = False

        logger.info("Solve worker started")
        self.status_changed.emit("Running")

        steps = None
        try:
            if self.reset_first:
                self.engine.reset()

            steps = self.engine.iter_auto_solution()
            for move in steps:
                self.move_made.emit(move)
                self.progress_changed.emit(self.engine.progress())

                if self._stop_requested:
                    logger.info(f"Stopped after move {move.sequence_number}")
                    break

                if self.move_delay_ms > 0:
                    self.msleep(self.move_delay_ms)

                if self._stop_requested:
                    logger.info(f"Stopped after move {move.sequence_number}")
                    break

            completed = self.engine.is_completed()
        except Exception as e:
            logger.exception("Error in solve worker")
            self.error_occurred.emit(str(e))
        finally:
            if steps is not None:
                steps.close()
            self._running = False

        self.status_changed.emit("Solved" if completed else "Stopped")
        self.solution_finished.emit(completed)
        logger.info(f"Solve worker finished, completed={completed}")

    def request_stop(self):
        """
        Request the worker to stop gracefully.

        The worker finishes the move in flight and stops before the
        next one. Use wait() after calling this to block until stopped.
        """
        logger.info("Stop requested")
        self._stop_requested = True

    def is_running(self) -> bool:
        """
        Check if the worker is currently solving.

        Returns:
            True if worker loop is active, False otherwise
        """
        return self._running
