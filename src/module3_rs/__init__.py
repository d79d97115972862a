# file: src/module3_rs/__init__.py

"""
Module 3: Error-Correction Primitive

GF(256) Reed-Solomon parity generation and substitution-error correction on
single in-place symbol buffers.

Public API:
    - ErrorCorrector: abstract contract (encode/decode in place)
    - ReedSolomonCorrector: reedsolo-backed implementation
"""

from .rs_codec import (
    ErrorCorrector,
    ReedSolomonCorrector,
    FIELD_PRIMITIVE,
    GENERATOR_BASE,
    MAX_CODEWORD_LENGTH,
)
from .errors import UncorrectableBlockError

__version__ = "1.0.0"

__all__ = [
    "ErrorCorrector",
    "ReedSolomonCorrector",
    "FIELD_PRIMITIVE",
    "GENERATOR_BASE",
    "MAX_CODEWORD_LENGTH",
    "UncorrectableBlockError",
]
