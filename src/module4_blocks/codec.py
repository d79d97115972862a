# file: src/module4_blocks/codec.py

"""
Block codec entry points.

Wires parameter derivation, the alphabet, the Reed-Solomon primitive, block
encoder/decoder and reassembler together.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from src.module1_params import (
    CodecConfig,
    DEFAULT_BLOCK_WIDTH,
    DEFAULT_ERROR_RATE,
    derive_parameters,
)
from src.module2_alphabet import Base32Alphabet, SymbolAlphabet
from src.module3_rs import ErrorCorrector, ReedSolomonCorrector

from .decoder import BlockDecoder
from .encoder import BlockEncoder
from .reassembler import reassemble
from .results import DecodeReport

logger = logging.getLogger(__name__)


class BlockCodec:
    """
    Payload <-> ordered block texts.

    Parameters:
        error_rate (float): Fraction of symbols per block that may be corrupted
        block_width (int): Symbols per full block, at most 255
        corrector: Error-correction primitive (default: ReedSolomonCorrector)
        alphabet: Text alphabet (default: Base32Alphabet)
        repair (bool): Attempt single-deletion repair on failing blocks

    Raises:
        ConfigurationError: On construction, if the configuration is invalid

    Example:
        >>> codec = BlockCodec(error_rate=0.2, block_width=10)
        >>> blocks = codec.encode(b"Hi")
        >>> codec.decode(blocks)
        b'Hi'
    """

    def __init__(
        self,
        error_rate: float = DEFAULT_ERROR_RATE,
        block_width: int = DEFAULT_BLOCK_WIDTH,
        corrector: Optional[ErrorCorrector] = None,
        alphabet: Optional[SymbolAlphabet] = None,
        repair: bool = True
    ):
        # Validate before any work
        self.params = derive_parameters(error_rate, block_width)
        self.error_rate = error_rate

        self.corrector = corrector if corrector is not None else ReedSolomonCorrector()
        self.alphabet = alphabet if alphabet is not None else Base32Alphabet()

        self.encoder = BlockEncoder(self.params, self.corrector, self.alphabet)
        self.decoder = BlockDecoder(self.params, self.corrector, self.alphabet, repair=repair)

    @classmethod
    def from_config(cls, config: Dict[str, Any], **kwargs) -> "BlockCodec":
        """Build from a configuration dictionary (see CodecConfig.from_dict)."""
        codec_config = CodecConfig.from_dict(config)
        kwargs.setdefault('repair', codec_config.repair)
        return cls(codec_config.error_rate, codec_config.block_width, **kwargs)

    def encode(self, payload: bytes) -> List[str]:
        """
        Encode payload into block texts, one per chunk, in order.

        Returns:
            List of uppercase, padded block texts
        """
        return self.encoder.encode(payload)

    def decode(self, blocks: Sequence[str]) -> bytes:
        """
        Decode block texts back into the payload.

        Raises:
            RepairExhausted: If any block cannot be recovered; no partial
                payload is returned
        """
        return self.decode_with_report(blocks).payload

    def decode_with_report(self, blocks: Sequence[str]) -> DecodeReport:
        """
        Decode block texts and collect per-block statistics.

        Returns:
            DecodeReport with the payload and one BlockResult per block
        """
        if isinstance(blocks, str):
            raise TypeError("blocks must be a sequence of block strings, not a single string")

        results = [self.decoder.decode_block(text, index) for index, text in enumerate(blocks)]
        report = DecodeReport(payload=reassemble(r.chunk for r in results), blocks=results)

        logger.debug(
            "Decoded %d blocks into %d bytes (%d symbols corrected, %d blocks repaired)",
            len(results), len(report.payload), report.num_corrected_symbols, report.num_repaired,
        )
        return report

    def get_config_summary(self) -> Dict[str, Any]:
        """
        Summarize the block layout.

        Returns:
            Dictionary with block_width, data_size, parity_size,
            correction_capacity, code_rate and redundancy_overhead
        """
        return CodecConfig(self.error_rate, self.params.block_width).summary()


def encode_blocks(payload: bytes, error_rate: float = DEFAULT_ERROR_RATE, block_width: int = DEFAULT_BLOCK_WIDTH) -> List[str]:
    """Encode payload into block texts with a one-off codec."""
    return BlockCodec(error_rate, block_width).encode(payload)


def decode_blocks(
    blocks: Sequence[str],
    error_rate: float = DEFAULT_ERROR_RATE,
    block_width: int = DEFAULT_BLOCK_WIDTH,
    repair: bool = True
) -> bytes:
    """Decode block texts with a one-off codec."""
    return BlockCodec(error_rate, block_width, repair=repair).decode(blocks)
