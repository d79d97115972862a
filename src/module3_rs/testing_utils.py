# file: src/module3_rs/testing_utils.py

"""
Testing utilities for the codec.

Provides symbol and transcription error injection for validation and
robustness testing. Used only in test/evaluation contexts.
"""

import random
from typing import Optional, Sequence


def inject_symbol_errors(
    data: bytes,
    num_errors: int,
    seed: Optional[int] = None,
    positions: Optional[Sequence[int]] = None
) -> bytes:
    """
    Replace symbols with different random values.

    Every chosen position is guaranteed to change, so the result holds
    exactly num_errors symbol errors.

    Args:
        data: Original block
        num_errors: Number of symbols to corrupt (ignored if positions given)
        seed: Random seed for reproducibility (optional)
        positions: Explicit positions to corrupt (optional)

    Returns:
        Data with injected symbol errors

    Example:
        >>> corrupted = inject_symbol_errors(b'\\x00' * 10, num_errors=2, seed=42)
        >>> sum(1 for b in corrupted if b != 0)
        2
    """
    rng = random.Random(seed)

    if positions is None:
        if not 0 <= num_errors <= len(data):
            raise ValueError(f"num_errors must be in [0, {len(data)}], got {num_errors}")
        positions = rng.sample(range(len(data)), num_errors)

    corrupted = bytearray(data)
    for pos in positions:
        old = corrupted[pos]
        new = rng.randrange(256)
        while new == old:
            new = rng.randrange(256)
        corrupted[pos] = new

    return bytes(corrupted)


def delete_character(text: str, position: int) -> str:
    """
    Simulate a transcriber dropping one character.

    Args:
        text: Block text
        position: Index of the character to drop

    Returns:
        Text with one character removed
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position must be in [0, {len(text)}), got {position}")
    return text[:position] + text[position + 1:]


def substitute_character(text: str, position: int, replacement: str) -> str:
    """Simulate a transcriber mistyping one character."""
    if not 0 <= position < len(text):
        raise ValueError(f"position must be in [0, {len(text)}), got {position}")
    return text[:position] + replacement + text[position + 1:]
