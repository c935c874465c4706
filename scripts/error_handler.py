"""Error handling for the headless runner.

Engine construction errors come from `dialphys.errors`; this module adds the
runner's own failure modes and the logging setup the CLI uses.
"""
import sys
import logging
from typing import Optional, Type
from pathlib import Path
from contextlib import contextmanager

from dialphys.errors import SimulationError


class FileOperationError(SimulationError):
    """Raised when a trajectory or metrics file cannot be written."""
    pass


class ErrorHandler:
    """Logging setup and error reporting for one runner invocation."""

    def __init__(self, log_file: Optional[Path] = None, verbose: bool = False):
        """
        Args:
            log_file: Optional path to also write the log to
            verbose: DEBUG output from the engines when set, warnings only otherwise
        """
        self.verbose = verbose
        self._setup_logging(log_file)

    def _setup_logging(self, log_file: Optional[Path]) -> None:
        handlers = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.append(logging.FileHandler(log_file))

        # Engines log at DEBUG only (init, count clamping)
        logging.basicConfig(
            level=logging.DEBUG if self.verbose else logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers,
            force=True
        )
        self.logger = logging.getLogger('dialphys.runner')

    def handle_error(self, error: Exception) -> int:
        """Log an error and return the process exit status for it."""
        if isinstance(error, SimulationError):
            self.logger.error(f"{type(error).__name__}: {error}")
        else:
            self.logger.exception(f"Unexpected error: {error}")
        return 1

    @contextmanager
    def error_context(self, operation: str, error_type: Type[SimulationError] = SimulationError):
        """Re-raise anything but a SimulationError as `error_type`.

        Args:
            operation: Short description used in the message, e.g. "save trajectory"
            error_type: SimulationError subclass to wrap foreign exceptions in
        """
        try:
            yield
        except SimulationError:
            raise
        except Exception as e:
            self.logger.error(f"Error during {operation}: {e}")
            raise error_type(f"Failed to {operation}: {e}") from e


def validate_output_path(path: Path, extension: str) -> None:
    """Check an output path before spending time on the simulation.

    Raises:
        FileOperationError: If the path names a directory or has the wrong suffix
    """
    if path.is_dir():
        raise FileOperationError(f"Output path is a directory: {path}")
    if path.suffix != f".{extension}":
        raise FileOperationError(f"Output path must end with .{extension}: {path}")
