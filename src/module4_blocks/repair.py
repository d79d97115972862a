# file: src/module4_blocks/repair.py

"""
Single-deletion repair.

A dropped character shifts every later symbol in a token, which looks like a
burst of substitutions no matter how much parity the block carries. The
repair reinserts the alphabet's zero symbol at every position in turn and
keeps the first candidate that decodes.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from src.module2_alphabet import SymbolAlphabet

from .results import DecodeAttempt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepairOutcome:
    """Result of a repair search."""
    attempt: Optional[DecodeAttempt]
    position: Optional[int]
    candidates_tried: int

    @property
    def ok(self) -> bool:
        return self.attempt is not None


class InsertionRepair:
    """
    Brute-force filler insertion over positions 0..L inclusive.

    Positions are tried in ascending order and the first success wins; later
    positions are never explored. A wrong insertion point that still lands
    within correction capacity of some codeword would be accepted, so a
    repaired block is only as trustworthy as its parity margin.

    Recovers exactly one deleted character. Transpositions, extra characters
    and multiple deletions are not attempted.
    """

    def __init__(self, alphabet: SymbolAlphabet):
        self.alphabet = alphabet

    def candidates(self, token: str) -> Iterator[str]:
        """Yield the L + 1 padded single-insertion candidates for a token."""
        clean = self.alphabet.strip_padding(token)
        filler = self.alphabet.filler
        for i in range(len(clean) + 1):
            yield self.alphabet.normalize_padding(clean[:i] + filler + clean[i:])

    def repair(self, token: str, attempt: Callable[[str], DecodeAttempt]) -> RepairOutcome:
        """
        Search for an insertion position that makes the token decode.

        Args:
            token: Separator-free block token (padding optional)
            attempt: Pure decode attempt returning a DecodeAttempt

        Returns:
            RepairOutcome with the first successful attempt and its position,
            or a failed outcome after all L + 1 candidates
        """
        tried = 0
        for position, candidate in enumerate(self.candidates(token)):
            tried += 1
            result = attempt(candidate)
            if result.ok:
                logger.debug("Repair succeeded at insertion position %d", position)
                return RepairOutcome(attempt=result, position=position, candidates_tried=tried)

        return RepairOutcome(attempt=None, position=None, candidates_tried=tried)
