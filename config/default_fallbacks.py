"""
Default configuration and fallback values for the Sudoku solver.

This module provides defaults for all system components.
"""

# Default configuration with fallback values for all components
DEFAULT_CONFIG = {
    # General system settings
    "system": {
        "debug_mode": False,
        "log_level": "INFO",
        "log_file": None,  # Extra log destination, stderr only when unset
    },

    # Input parsing settings
    "parser": {
        "delimiter": ",",
    },

    # Sudoku solver settings
    "solver": {
        "validate_solution": True,
        "raise_recursion_limit": True,  # One frame per empty cell
    },

    # Rendering settings
    "renderer": {
        "show_blank_as": " ",
        "figure_cell_size": 0.5,  # Inches per cell
    },

    # Benchmark settings
    "benchmark": {
        "repeats": 3,
    },
}

# Log levels accepted in system.log_level
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Built-in puzzle used when no input file is given
DEFAULT_PUZZLE = """\
5,3,,,7,,,,
6,,,1,9,5,,,
,9,8,,,,,6,
8,,,,6,,,,3
4,,,8,,3,,,1
7,,,,2,,,,6
,6,,,,,2,8,
,,,4,1,9,,,5
,,,,8,,,7,9
"""

# Default error messages
DEFAULT_ERROR_MESSAGES = {
    "input_read_failed": "Could not read the puzzle file. Please check the path and try again.",
    "invalid_input": "The puzzle file is not a valid square Sudoku board.",
    "solving_failed": "The puzzle has no solution.",
    "verification_failed": "The solver reported a solution that breaks the Sudoku rules.",
}
