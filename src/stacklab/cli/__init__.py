"""
Stack Lab Command-Line Interface
================================

This package provides the ``stacklab`` command:

- **convert**: infix to postfix conversion
- **eval**: postfix evaluation
- **calc**: conversion followed by evaluation
- **shell**: interactive bounded-stack and expression session

The tool is a Click-based CLI application; it only calls the core
operations and prints their results.
"""

__all__ = ["stacklab"]
