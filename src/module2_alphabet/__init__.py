# file: src/module2_alphabet/__init__.py

"""
Module 2: Alphabet Codec

Renders byte blocks in a restricted, case-insensitive, human-transcribable
alphabet and parses them back, tolerating missing trailing padding.
"""

from .alphabet import SymbolAlphabet, Base32Alphabet
from .errors import LexicalError

__version__ = "1.0.0"

__all__ = [
    "SymbolAlphabet",
    "Base32Alphabet",
    "LexicalError",
]
