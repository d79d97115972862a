# file: src/module4_blocks/reassembler.py

"""
Reassembler.

Concatenates recovered chunks strictly in block sequence order. No framing,
no separators and no cross-block consistency check.
"""

from typing import Iterable


def reassemble(chunks: Iterable[bytes]) -> bytes:
    """
    Join decoded chunks into the final payload.

    Args:
        chunks: Recovered chunk bytes in block sequence order

    Returns:
        Payload bytes
    """
    return b''.join(chunks)
