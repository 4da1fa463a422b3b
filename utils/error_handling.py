"""
Centralized error handling and logging system.

This module provides the custom exceptions and error logging helpers
for the Sudoku solver.
"""

import sys
import traceback
import logging
from typing import Any, Dict, Optional, Type

# Configure logging
logger = logging.getLogger(__name__)


# Base exception class for all system errors
class SudokuSolverError(Exception):
    """Base exception class for all Sudoku solver errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception with message and optional details.

        Args:
            message: Error message
            details: Additional error details and context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Configuration errors
class ConfigError(SudokuSolverError):
    """Error in system configuration."""
    pass


# Input errors
class SudokuParseError(SudokuSolverError):
    """Base class for errors building a grid from input."""
    pass


class NonSquareError(SudokuParseError):
    """Cell count is not a perfect fourth power."""

    def __init__(self, cell_count: int):
        super().__init__(
            "board not square",
            {"cell_count": cell_count}
        )


class DigitOutOfRangeError(SudokuParseError):
    """A cell value does not fit the board."""

    def __init__(self, value: int, row_width: int, index: Optional[int] = None):
        super().__init__(
            "digit not in range for board",
            {"value": value, "row_width": row_width, "index": index}
        )


class InvalidDigitError(SudokuParseError):
    """A field could not be read as a non-negative integer."""

    def __init__(self, field: str, line: Optional[int] = None):
        super().__init__(
            "invalid digit in board",
            {"field": field, "line": line}
        )


# Solving errors
class InvalidPuzzleError(SudokuSolverError):
    """Grid violates row, column or box uniqueness."""
    pass


def log_error(
    error: Exception,
    level: int = logging.ERROR,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log an error with context and traceback.

    Args:
        error: Exception to log
        level: Logging level
        context: Additional context information
    """
    ctx_str = f" [Context: {context}]" if context else ""

    if isinstance(error, SudokuSolverError) and error.details:
        ctx_str += f" [Details: {error.details}]"

    error_type = type(error).__name__
    error_tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))

    logger.log(level, f"{error_type}: {str(error)}{ctx_str}\n{error_tb}")


def setup_exception_handling() -> None:
    """
    Set up global exception handling for unexpected errors.
    """
    def global_exception_handler(
        exc_type: Type[BaseException],
        exc_value: BaseException,
        exc_traceback: Optional[Any]
    ) -> None:
        """
        Global handler for uncaught exceptions.

        Args:
            exc_type: Exception type
            exc_value: Exception instance
            exc_traceback: Exception traceback
        """
        # Skip KeyboardInterrupt
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        # Log the error
        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    # Set the exception hook
    sys.excepthook = global_exception_handler
