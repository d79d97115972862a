# file: src/module4_blocks/__init__.py

"""
Module 4: Block Pipeline

Chunks payloads into Reed-Solomon protected blocks, renders them as text,
and reverses the transform with single-deletion repair.

Public API:
    - BlockCodec: encode(payload) -> List[str], decode(blocks) -> bytes
    - encode_blocks(payload, error_rate, block_width) -> List[str]
    - decode_blocks(blocks, error_rate, block_width) -> bytes
"""

from .codec import BlockCodec, encode_blocks, decode_blocks
from .encoder import BlockEncoder
from .decoder import BlockDecoder, normalize_token, BLOCK_MARKER
from .repair import InsertionRepair, RepairOutcome
from .reassembler import reassemble
from .results import DecodeAttempt, BlockResult, DecodeReport
from .errors import RepairExhausted

__version__ = "1.0.0"

__all__ = [
    "BlockCodec",
    "encode_blocks",
    "decode_blocks",
    "BlockEncoder",
    "BlockDecoder",
    "normalize_token",
    "BLOCK_MARKER",
    "InsertionRepair",
    "RepairOutcome",
    "reassemble",
    "DecodeAttempt",
    "BlockResult",
    "DecodeReport",
    "RepairExhausted",
]
