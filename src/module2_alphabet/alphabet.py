# file: src/module2_alphabet/alphabet.py

"""
Restricted text alphabet for rendering blocks.

Blocks are written out in a 32-symbol, case-insensitive alphabet so that a
human can copy them by hand. Trailing padding is optional on input: some
environments strip it, so decode() re-pads before parsing.
"""

import base64
from abc import ABC, abstractmethod

from .errors import LexicalError


class SymbolAlphabet(ABC):
    """
    Bidirectional mapping between raw byte blocks and text.

    Subclasses define the character set; padding handling is shared.

    Attributes:
        pad_char: Character used to fill the final quantum
        quantum: Text length every padded token is a multiple of
        filler: The alphabet's zero symbol, used when reinserting a lost character
    """

    pad_char = "="
    quantum = 8
    filler = "A"

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Render bytes as padded, uppercase text."""

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Parse text (padded or not) back to bytes. Raises LexicalError."""

    def normalize_padding(self, text: str) -> str:
        """
        Append exactly enough padding to reach the next multiple of quantum.

        Text whose length is already a multiple of quantum is returned unchanged.
        """
        missing = len(text) % self.quantum
        if missing:
            text += self.pad_char * (self.quantum - missing)
        return text

    def strip_padding(self, text: str) -> str:
        return text.rstrip(self.pad_char)


class Base32Alphabet(SymbolAlphabet):
    """
    RFC 4648 base32 (A-Z, 2-7) with '=' padding.

    Example:
        >>> alphabet = Base32Alphabet()
        >>> alphabet.encode(b"Hi")
        'JBUQ===='
        >>> alphabet.decode("jbuq")
        b'Hi'
    """

    def encode(self, data: bytes) -> str:
        return base64.b32encode(bytes(data)).decode('ascii')

    def decode(self, text: str) -> bytes:
        padded = self.normalize_padding(text)
        try:
            return base64.b32decode(padded, casefold=True)
        except ValueError as e:
            # binascii.Error and non-ASCII input both derive from ValueError
            raise LexicalError(f"Invalid base32 token {text!r}: {e}") from e
