# file: src/module6_cli/__init__.py

"""
Module 6: Command-Line Interface

Public API:
    - main(argv=None) -> int
"""

from .cli import main, parse_arguments, setup_logging, resolve_config

__all__ = [
    'main',
    'parse_arguments',
    'setup_logging',
    'resolve_config',
]
