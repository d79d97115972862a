# file: src/module1_params/params.py

"""
Coding parameter derivation.

Turns a user-chosen error tolerance and block width into the Reed-Solomon
layout used by every block: how many data bytes a block carries, how many
parity bytes follow them, and how many symbol substitutions are guaranteed
correctable.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from .errors import ConfigurationError


# GF(256) limits a codeword to 255 symbols
MAX_BLOCK_WIDTH = 255

DEFAULT_ERROR_RATE = 0.2
DEFAULT_BLOCK_WIDTH = 200


@dataclass(frozen=True)
class CodingParameters:
    """
    Derived Reed-Solomon layout for one configuration.

    Invariants:
        - data_size + parity_size == block_width
        - data_size > 0
        - correction_capacity == parity_size // 2
    """
    block_width: int
    data_size: int
    parity_size: int
    correction_capacity: int

    @property
    def code_rate(self) -> float:
        """Fraction of each full block that carries payload."""
        return self.data_size / self.block_width

    @property
    def redundancy_overhead(self) -> float:
        """Parity bytes added per payload byte."""
        return self.parity_size / self.data_size


def derive_parameters(error_rate: float, block_width: int) -> CodingParameters:
    """
    Derive block layout from error tolerance and block width.

    parity_size = ceil(2 * error_rate * block_width)
    data_size = block_width - parity_size
    correction_capacity = floor(parity_size / 2)

    Args:
        error_rate: Fraction of symbols per block that may be corrupted, in (0, 1)
        block_width: Total symbols per full block, in [1, 255]

    Returns:
        CodingParameters for the configuration

    Raises:
        ConfigurationError: If block_width is out of range, error_rate is not
            in (0, 1), or the derived data_size is not positive

    Example:
        >>> params = derive_parameters(0.2, 200)
        >>> (params.parity_size, params.data_size, params.correction_capacity)
        (80, 120, 40)
    """
    if isinstance(block_width, bool) or not isinstance(block_width, int):
        raise ConfigurationError(f"Block width must be an integer, got {block_width!r}")
    if isinstance(error_rate, bool) or not isinstance(error_rate, (int, float)):
        raise ConfigurationError(f"Error rate must be a number, got {error_rate!r}")

    if block_width > MAX_BLOCK_WIDTH:
        raise ConfigurationError(
            f"Block width {block_width} exceeds GF(256) limit of {MAX_BLOCK_WIDTH}"
        )
    if block_width < 1:
        raise ConfigurationError(f"Block width must be >= 1, got {block_width}")
    if not 0.0 < error_rate < 1.0:
        raise ConfigurationError(f"Error rate must be in (0, 1), got {error_rate}")

    parity_size = math.ceil(2 * error_rate * block_width)
    data_size = block_width - parity_size

    if data_size <= 0:
        raise ConfigurationError(
            f"Error rate {error_rate} is too high for block width {block_width}"
        )

    return CodingParameters(
        block_width=block_width,
        data_size=data_size,
        parity_size=parity_size,
        correction_capacity=parity_size // 2,
    )


@dataclass(frozen=True)
class CodecConfig:
    """User-facing codec configuration (read-only for the duration of a call)."""
    error_rate: float = DEFAULT_ERROR_RATE
    block_width: int = DEFAULT_BLOCK_WIDTH
    repair: bool = True

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "CodecConfig":
        """
        Build from a configuration dictionary.

        Configuration Schema:
            config['codec']['error_rate']: float in (0, 1) (required)
            config['codec']['block_width']: int in [1, 255] (required)
            config['codec']['repair']: bool (default: True)

        Raises:
            ConfigurationError: If a required key is missing or values are invalid
        """
        try:
            codec_config = config['codec']
            error_rate = codec_config['error_rate']
            block_width = codec_config['block_width']
        except (KeyError, TypeError) as e:
            raise ConfigurationError(f"Missing required config key: {e}") from e

        result = cls(
            error_rate=error_rate,
            block_width=block_width,
            repair=bool(codec_config.get('repair', True)),
        )
        # Fail early rather than on first use
        result.parameters()
        return result

    def parameters(self) -> CodingParameters:
        return derive_parameters(self.error_rate, self.block_width)

    def summary(self) -> Dict[str, Any]:
        """
        Summarize the derived layout.

        Returns:
            Dictionary with block_width, data_size, parity_size,
            correction_capacity, code_rate and redundancy_overhead
        """
        params = self.parameters()
        return {
            'error_rate': self.error_rate,
            'block_width': params.block_width,
            'data_size': params.data_size,
            'parity_size': params.parity_size,
            'correction_capacity': params.correction_capacity,
            'code_rate': params.code_rate,
            'redundancy_overhead': params.redundancy_overhead,
        }
