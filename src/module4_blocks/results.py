# file: src/module4_blocks/results.py

"""
Result values passed between decoder and repair strategy.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.module1_params.errors import CodecError


@dataclass(frozen=True)
class DecodeAttempt:
    """Outcome of one alphabet-decode + RS-decode attempt on one token."""
    chunk: Optional[bytes] = None
    corrected: int = 0
    error: Optional[CodecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, chunk: bytes, corrected: int) -> "DecodeAttempt":
        return cls(chunk=chunk, corrected=corrected)

    @classmethod
    def failure(cls, error: CodecError) -> "DecodeAttempt":
        return cls(error=error)


@dataclass(frozen=True)
class BlockResult:
    """A successfully decoded block."""
    index: int
    chunk: bytes
    corrected: int  # symbols fixed by the RS decoder
    repaired_at: Optional[int] = None  # filler insertion position, if repair was needed


@dataclass
class DecodeReport:
    """Payload plus per-block decoding statistics."""
    payload: bytes
    blocks: List[BlockResult] = field(default_factory=list)

    @property
    def num_repaired(self) -> int:
        return sum(1 for b in self.blocks if b.repaired_at is not None)

    @property
    def num_corrected_symbols(self) -> int:
        return sum(b.corrected for b in self.blocks)
