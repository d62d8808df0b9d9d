"""
Canary Command-Line Interface
=============================

This package provides the ``canary`` command-line tool:

- **run**: parse a source file
- **tokens**: dump the token stream of a source file
- **build-tests** / **test**: golden-file token regression tests

The tool is a Click-based CLI application with severity-tagged
diagnostics and uniform exit codes.
"""

__all__ = ["canary"]
