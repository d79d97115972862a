# file: src/module4_blocks/decoder.py

"""
Block decoder.

Reverses one block text: strip separators, alphabet-decode, correct with the
Reed-Solomon primitive, and fall back to single-deletion repair when either
step fails.
"""

import logging
import re
from typing import Optional

from src.module1_params import CodingParameters
from src.module2_alphabet import SymbolAlphabet, LexicalError
from src.module3_rs import ErrorCorrector, UncorrectableBlockError

from .errors import RepairExhausted
from .repair import InsertionRepair
from .results import BlockResult, DecodeAttempt

logger = logging.getLogger(__name__)


BLOCK_MARKER = re.compile(r'Block #\d+')
_SEPARATORS = re.compile(r'[-\s]+')


def normalize_token(text: str) -> str:
    """
    Strip "Block #N" markers, dashes, spaces, tabs and line breaks.

    Example:
        >>> normalize_token("Block #0\\nJBUQ-AAAA\\n")
        'JBUQAAAA'
    """
    return _SEPARATORS.sub('', BLOCK_MARKER.sub('', text))


class BlockDecoder:
    """
    Block text -> chunk bytes.

    Args:
        params: Derived block layout (parity_size drives RS decoding)
        corrector: Error-correction primitive
        alphabet: Text alphabet blocks were rendered in
        repair: Whether to attempt single-deletion repair on failure

    Notes:
        - Only substitution errors are corrected, up to correction_capacity
          symbols per block
        - Repair accepts the first insertion position that decodes; see
          InsertionRepair for the residual risk this carries
    """

    def __init__(
        self,
        params: CodingParameters,
        corrector: ErrorCorrector,
        alphabet: SymbolAlphabet,
        repair: bool = True
    ):
        self.params = params
        self.corrector = corrector
        self.alphabet = alphabet
        self.repair_strategy: Optional[InsertionRepair] = InsertionRepair(alphabet) if repair else None

    def try_decode(self, token: str) -> DecodeAttempt:
        """
        Single decode attempt on a separator-free token.

        Never raises for lexical or correction failures; the error is
        returned inside the DecodeAttempt instead.
        """
        try:
            raw = self.alphabet.decode(token)
        except LexicalError as e:
            return DecodeAttempt.failure(e)

        if len(raw) > self.params.block_width:
            return DecodeAttempt.failure(UncorrectableBlockError(
                f"Block length {len(raw)} exceeds block width {self.params.block_width}",
                max_correctable=self.params.correction_capacity,
            ))

        buffer = bytearray(raw)
        try:
            corrected = self.corrector.decode(buffer, self.params.parity_size)
        except UncorrectableBlockError as e:
            return DecodeAttempt.failure(e)

        return DecodeAttempt.success(bytes(buffer[:len(buffer) - self.params.parity_size]), corrected)

    def decode_block(self, text: str, index: int = 0) -> BlockResult:
        """
        Decode one block, repairing a single dropped character if needed.

        Args:
            text: Block text, possibly with separators and without padding
            index: 0-based position of the block in its sequence

        Returns:
            BlockResult with the recovered chunk

        Raises:
            RepairExhausted: If neither the direct decode nor any repair
                candidate succeeds
        """
        token = normalize_token(text)

        # Alphabet decode + RS correct
        first = self.try_decode(token)
        if first.ok:
            if first.corrected:
                logger.debug("Block %d: corrected %d symbols", index, first.corrected)
            return BlockResult(index=index, chunk=first.chunk, corrected=first.corrected)

        logger.debug("Block %d: direct decode failed (%s)", index, first.error)

        if self.repair_strategy is None:
            raise RepairExhausted(
                f"Block {index}: decoding failed: {first.error}",
                block_index=index,
                cause=first.error,
            ) from first.error

        outcome = self.repair_strategy.repair(token, self.try_decode)
        if not outcome.ok:
            raise RepairExhausted(
                f"Block {index}: decoding failed after {outcome.candidates_tried} "
                f"repair candidates: {first.error}",
                block_index=index,
                cause=first.error,
            ) from first.error

        logger.warning(
            "Block %d: repaired dropped character at position %d", index, outcome.position
        )
        return BlockResult(
            index=index,
            chunk=outcome.attempt.chunk,
            corrected=outcome.attempt.corrected,
            repaired_at=outcome.position,
        )
