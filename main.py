"""
Towers of Hanoi Simulator - Entry Point

Runs the auto-solution on a background worker thread and reports each
move on the console as it happens.

Example:
    python main.py
    python main.py --discs 5 --delay 100
    python main.py --discs 4 --delay 0 --save   # Remember these settings
"""

import sys
import logging
import argparse
from typing import Optional

from PyQt5.QtCore import QCoreApplication

from hanoi_sim.engine import (
    PuzzleEngine,
    Move,
    format_game_state,
    format_towers,
)
from hanoi_sim.solver_worker import SolveWorker
from hanoi_sim.settings import load_settings, save_settings, move_delay_ms


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("hanoi.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Main application controller.

    Owns the engine and the worker thread and connects the worker's
    signals to console reporting.
    """

    def __init__(self, app: QCoreApplication, engine: PuzzleEngine, move_delay_ms: int):
        """
        Initialize the application.

        Args:
            app: Running Qt application (event loop owner)
            engine: Puzzle to solve
            move_delay_ms: Pause between moves
        """
        self.app = app
        self.engine = engine
        self.move_delay_ms = move_delay_ms
        self.worker: Optional[SolveWorker] = None

    def setup(self):
        """Create the worker and connect signals."""
        self.worker = SolveWorker(self.engine, move_delay_ms=self.move_delay_ms)

        self.worker.status_changed.connect(self._on_status)
        self.worker.move_made.connect(self._on_move)
        self.worker.progress_changed.connect(self._on_progress)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.solution_finished.connect(self._on_finished)

        logger.info(f"Application initialized: {self.engine.disc_count} discs, "
                    f"{self.engine.minimum_moves()} moves expected")

    def run(self):
        """Print the starting position and start the worker."""
        print(format_towers(self.engine))
        self.worker.start()

    def _on_status(self, status: str):
        """Handle worker status change."""
        logger.info(f"Worker status: {status}")

    def _on_move(self, move: Move):
        """Handle a move made by the worker."""
        print(move)

    def _on_progress(self, progress: float):
        """Handle progress update from worker."""
        logger.debug(f"Discs on peg C: {progress * 100:.0f}%")

    def _on_error(self, error_msg: str):
        """Handle worker error."""
        logger.error(f"Worker error: {error_msg}")

    def _on_finished(self, completed: bool):
        """Report the final state and leave the event loop."""
        self.worker.wait()
        print()
        print(format_towers(self.engine))
        print()
        print(format_game_state(self.engine))
        self.app.exit(0 if completed else 1)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Towers of Hanoi Simulator - Watch the optimal solution play out"
    )
    parser.add_argument(
        "--discs", "-n",
        type=int,
        default=None,
        help="Number of discs, 3-6 (default: saved setting)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=None,
        help="Pause between moves in milliseconds (default: saved setting)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store the given options in config.json"
    )
    return parser.parse_args()


def main():
    """Initialize and run the simulator."""
    args = parse_args()

    # Load persistent settings, CLI flags override them
    settings = load_settings()
    if args.discs is not None:
        settings["disc_count"] = args.discs
    if args.delay is not None:
        settings["move_delay_ms"] = args.delay
    if args.debug:
        settings["debug_enabled"] = True

    configure_logging(settings.get("debug_enabled", False))

    # Bad settings end the run before any thread or event loop exists
    try:
        delay_ms = move_delay_ms(settings)
        engine = PuzzleEngine(settings["disc_count"])
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)

    app = QCoreApplication(sys.argv)
    application = Application(app, engine, move_delay_ms=delay_ms)

    if args.save:
        save_settings(settings)

    application.setup()
    application.run()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
