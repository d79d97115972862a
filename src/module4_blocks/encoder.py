# file: src/module4_blocks/encoder.py

"""
Block encoder.

Splits a payload into chunks of at most data_size bytes and protects each one
with parity_size Reed-Solomon parity symbols. Block order is the only
positional information kept, so output order always equals chunk order.
"""

import logging
from typing import Iterator, List

from src.module1_params import CodingParameters
from src.module2_alphabet import SymbolAlphabet
from src.module3_rs import ErrorCorrector

logger = logging.getLogger(__name__)


class BlockEncoder:
    """
    Payload -> ordered block texts.

    Args:
        params: Derived block layout
        corrector: Error-correction primitive
        alphabet: Text alphabet for rendering blocks
    """

    def __init__(self, params: CodingParameters, corrector: ErrorCorrector, alphabet: SymbolAlphabet):
        self.params = params
        self.corrector = corrector
        self.alphabet = alphabet

    def chunk(self, payload: bytes) -> Iterator[bytes]:
        """Yield successive slices of at most data_size bytes; only the last may be shorter."""
        step = self.params.data_size
        for offset in range(0, len(payload), step):
            yield payload[offset:offset + step]

    def encode_block(self, chunk: bytes) -> bytes:
        """
        Protect one chunk.

        Returns:
            len(chunk) + parity_size symbols: data followed by parity
        """
        # Trailing parity region stays zero until the corrector fills it
        buffer = bytearray(len(chunk) + self.params.parity_size)
        buffer[:len(chunk)] = chunk
        self.corrector.encode(buffer, self.params.parity_size)
        return bytes(buffer)

    def encode(self, payload: bytes) -> List[str]:
        """
        Encode a payload into block texts.

        Args:
            payload: Arbitrary-length bytes

        Returns:
            One alphabet-encoded block per chunk, in chunk order
            (empty list for an empty payload)
        """
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError(f"Payload must be bytes-like, got {type(payload)}")

        blocks = [self.alphabet.encode(self.encode_block(chunk)) for chunk in self.chunk(bytes(payload))]
        logger.debug("Encoded %d bytes into %d blocks", len(payload), len(blocks))
        return blocks
