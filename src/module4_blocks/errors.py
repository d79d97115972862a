# file: src/module4_blocks/errors.py

"""
Block pipeline exceptions.
"""

from typing import Optional

from src.module1_params.errors import CodecError


class RepairExhausted(CodecError):
    """
    Raised when a block fails to decode and no repair candidate succeeds.

    Attributes:
        block_index: 0-based position of the failing block in the sequence
        cause: The LexicalError or UncorrectableBlockError from the unrepaired decode
    """

    def __init__(self, message: str, block_index: int, cause: Optional[CodecError] = None):
        super().__init__(message)
        self.block_index = block_index
        self.cause = cause
