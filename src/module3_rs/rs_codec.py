# file: src/module3_rs/rs_codec.py

"""
Reed-Solomon error-correction primitive.

Uses the reedsolo library for Galois Field arithmetic and RS encoding/decoding
over GF(256) with primitive polynomial 0x11D, generator 2 and first
consecutive root 0. Buffers are modified in place: the trailing parity_size
positions hold parity, everything before them holds data.
"""

from abc import ABC, abstractmethod
from typing import Dict

from reedsolo import RSCodec, ReedSolomonError

from .errors import UncorrectableBlockError


FIELD_PRIMITIVE = 0x11D
FIELD_GENERATOR = 2
FIELD_EXPONENT = 8
GENERATOR_BASE = 0
MAX_CODEWORD_LENGTH = 255


class ErrorCorrector(ABC):
    """Appends and validates parity symbols on a mutable symbol buffer."""

    @abstractmethod
    def encode(self, buffer: bytearray, parity_size: int) -> None:
        """
        Write parity into the trailing parity_size positions of buffer.

        The parity region must be zero-initialized and the leading positions
        must hold the data symbols.
        """

    @abstractmethod
    def decode(self, buffer: bytearray, parity_size: int) -> int:
        """
        Correct up to parity_size // 2 symbol errors anywhere in buffer.

        Returns:
            Number of symbols corrected

        Raises:
            UncorrectableBlockError: If the error count exceeds capacity
        """


class ReedSolomonCorrector(ErrorCorrector):
    """
    reedsolo-backed corrector.

    Invariants:
        - len(buffer) <= 255 (GF(256) constraint)
        - len(buffer) > parity_size
        - Corrects up to parity_size // 2 substitution errors; erasure
          decoding is never used
    """

    def __init__(self):
        self._codecs: Dict[int, RSCodec] = {}

    def _codec(self, parity_size: int) -> RSCodec:
        codec = self._codecs.get(parity_size)
        if codec is None:
            codec = RSCodec(
                parity_size,
                nsize=MAX_CODEWORD_LENGTH,
                fcr=GENERATOR_BASE,
                prim=FIELD_PRIMITIVE,
                generator=FIELD_GENERATOR,
                c_exp=FIELD_EXPONENT,
            )
            self._codecs[parity_size] = codec
        return codec

    def encode(self, buffer: bytearray, parity_size: int) -> None:
        if parity_size < 1:
            raise ValueError(f"parity_size must be >= 1, got {parity_size}")
        if len(buffer) > MAX_CODEWORD_LENGTH:
            raise ValueError(
                f"Block length {len(buffer)} exceeds GF(256) limit of {MAX_CODEWORD_LENGTH}"
            )
        if len(buffer) <= parity_size:
            raise ValueError(
                f"Block length {len(buffer)} leaves no room for data with {parity_size} parity symbols"
            )
        if any(buffer[-parity_size:]):
            raise ValueError("Parity region must be zero-initialized")

        encoded = self._codec(parity_size).encode(bytes(buffer[:-parity_size]))
        buffer[-parity_size:] = encoded[-parity_size:]

    def decode(self, buffer: bytearray, parity_size: int) -> int:
        max_correctable = parity_size // 2

        if parity_size < 1:
            raise ValueError(f"parity_size must be >= 1, got {parity_size}")
        if len(buffer) > MAX_CODEWORD_LENGTH or len(buffer) <= parity_size:
            raise UncorrectableBlockError(
                f"Block length {len(buffer)} is not a valid codeword length "
                f"for {parity_size} parity symbols",
                max_correctable=max_correctable,
            )

        try:
            # reedsolo returns (message, message + ecc, errata positions)
            _, corrected, errata_pos = self._codec(parity_size).decode(bytes(buffer))
        except (ReedSolomonError, ZeroDivisionError) as e:
            raise UncorrectableBlockError(
                f"Reed-Solomon correction failed: {e}",
                max_correctable=max_correctable,
            ) from e

        buffer[:] = corrected
        return len(errata_pos)
