"""
Exit codes for Pomotodo CLI.

Semantic exit codes so scripts wrapping the CLI can tell failures apart.
"""

# Success (also the TUI's exit code on quit)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Task file could not be read or written
ERROR_STORAGE = 3
