# file: src/module3_rs/errors.py

"""
Error-correction exceptions.
"""

from typing import Optional

from src.module1_params.errors import CodecError


class UncorrectableBlockError(CodecError):
    """Raised when a block holds more symbol errors than the correction capacity."""

    def __init__(self, message: str, max_correctable: Optional[int] = None):
        super().__init__(message)
        self.max_correctable = max_correctable
