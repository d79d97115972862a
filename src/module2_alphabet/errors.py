# file: src/module2_alphabet/errors.py

"""
Alphabet codec exceptions.
"""

from src.module1_params.errors import CodecError


class LexicalError(CodecError):
    """Raised when a token has characters outside the alphabet after padding normalization."""
    pass
