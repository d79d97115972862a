# file: src/module5_artifact/artifact.py

"""
Artifact text format.

An encoded artifact is line oriented:

    #RS:<error_rate>:<block_width>      (optional header)
    <block 0 text>
    <block 1 text>
    ...

For printing, blocks may instead be laid out under "Block #<n>" labels as
rows of dash-joined 5-character clusters. Labels, dashes and whitespace are
never data; the parser discards them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from src.module1_params import CodecConfig, ConfigurationError, get_section, load_config
from src.module4_blocks import BLOCK_MARKER, BlockCodec, DecodeReport, normalize_token

logger = logging.getLogger(__name__)


HEADER_PREFIX = "#RS:"
DEFAULT_GROUP_SIZE = 5
DEFAULT_GROUPS_PER_ROW = 4


@dataclass
class ParsedArtifact:
    """Header configuration (if present) and separator-free block tokens."""
    blocks: List[str] = field(default_factory=list)
    error_rate: Optional[float] = None
    block_width: Optional[int] = None

    @property
    def has_header(self) -> bool:
        return self.error_rate is not None


def format_header(error_rate: float, block_width: int) -> str:
    """
    Render the configuration header line.

    Example:
        >>> format_header(0.2, 200)
        '#RS:0.2:200'
    """
    return f"{HEADER_PREFIX}{error_rate!r}:{block_width}"


def is_header(line: str) -> bool:
    return line.strip().startswith(HEADER_PREFIX)


def parse_header(line: str) -> Tuple[float, int]:
    """
    Parse a "#RS:<error_rate>:<block_width>" line.

    Returns:
        (error_rate, block_width)

    Raises:
        ConfigurationError: If the line is not a well-formed header
    """
    text = ''.join(line.split())
    if not text.startswith(HEADER_PREFIX):
        raise ConfigurationError(f"Not a codec header: {line!r}")

    parts = text[len(HEADER_PREFIX):].split(':')
    if len(parts) != 2:
        raise ConfigurationError(f"Malformed codec header: {line!r}")

    try:
        return float(parts[0]), int(parts[1])
    except ValueError as e:
        raise ConfigurationError(f"Malformed codec header {line!r}: {e}") from e


def render_artifact(
    blocks: Sequence[str],
    error_rate: float,
    block_width: int,
    header: bool = True
) -> str:
    """Header line (optional) followed by one block per line."""
    lines = [format_header(error_rate, block_width)] if header else []
    lines.extend(blocks)
    return '\n'.join(lines)


def format_blocks(
    blocks: Sequence[str],
    group_size: int = DEFAULT_GROUP_SIZE,
    groups_per_row: int = DEFAULT_GROUPS_PER_ROW
) -> str:
    """
    Lay blocks out for printing or reading aloud.

    Each block gets a "Block #<n>" label line followed by rows of
    groups_per_row clusters of group_size characters joined by dashes.
    Blocks are separated by a blank line. Header lines are skipped.

    Example:
        >>> print(format_blocks(["JBUQAAAAAAAAAAAA"], group_size=5, groups_per_row=2))
        Block #0
        JBUQA-AAAAA
        AAAAA-A
    """
    if group_size < 1 or groups_per_row < 1:
        raise ValueError("group_size and groups_per_row must be >= 1")

    sections = []
    index = 0
    for block in blocks:
        clean = block.strip()
        if not clean or is_header(clean):
            continue

        groups = [clean[i:i + group_size] for i in range(0, len(clean), group_size)]
        rows = [
            '-'.join(groups[i:i + groups_per_row])
            for i in range(0, len(groups), groups_per_row)
        ]
        sections.append('\n'.join([f"Block #{index}"] + rows))
        index += 1

    return '\n\n'.join(sections)


def split_artifact(text: str) -> ParsedArtifact:
    """
    Split artifact text into block tokens.

    Formatted mode (any "Block #<n>" label present): the text is cut at the
    labels and each part stripped of dashes and whitespace. Raw mode: one
    block per non-blank line, dashes and whitespace removed. In both modes a
    leading "#RS:" line is taken as the header.

    Raises:
        ConfigurationError: If a header line is present but malformed
    """
    parsed = ParsedArtifact()

    if BLOCK_MARKER.search(text):
        parts = BLOCK_MARKER.split(text)
        preamble = parts[0].strip().splitlines()
        if preamble and is_header(preamble[0]):
            parsed.error_rate, parsed.block_width = parse_header(preamble[0])
            preamble = preamble[1:]
        candidates = ['\n'.join(preamble)] + parts[1:]
    else:
        lines = [line for line in text.splitlines() if line.strip()]
        # Header is parsed before dash removal: an exponent like 1e-05 has a dash
        if lines and is_header(lines[0]):
            parsed.error_rate, parsed.block_width = parse_header(lines[0])
            lines = lines[1:]
        candidates = lines

    parsed.blocks = [token for token in (normalize_token(c) for c in candidates) if token]
    return parsed


def split_block_list(blocks: Sequence[str]) -> ParsedArtifact:
    """
    Normalize a pre-split list of block strings.

    Empty entries are dropped; a first entry starting with "#RS:" is taken
    as the header.
    """
    entries = [b for b in blocks if b.strip()]
    parsed = ParsedArtifact()

    if entries and is_header(entries[0]):
        parsed.error_rate, parsed.block_width = parse_header(entries[0])
        entries = entries[1:]

    parsed.blocks = [token for token in (normalize_token(e) for e in entries) if token]
    return parsed


def _layout_setting(format_config: Dict[str, Any], key: str, default: int) -> int:
    value = format_config.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"format.{key} must be a positive integer, got {value!r}")
    return value


def encode_artifact(
    payload: bytes,
    config: Optional[Dict[str, Any]] = None,
    formatted: bool = False,
    header: bool = True
) -> str:
    """
    Encode a payload into artifact text.

    Args:
        payload: Bytes to protect
        config: Configuration dictionary (default: bundled default_config.yaml)
        formatted: Use the labelled, dash-grouped print layout
        header: Prepend the "#RS:" configuration line

    Returns:
        Artifact text

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if config is None:
        config = load_config()

    codec_config = CodecConfig.from_dict(config)
    blocks = BlockCodec(codec_config.error_rate, codec_config.block_width).encode(payload)

    if not formatted:
        return render_artifact(blocks, codec_config.error_rate, codec_config.block_width, header=header)

    format_config = get_section(config, 'format')
    body = format_blocks(
        blocks,
        group_size=_layout_setting(format_config, 'group_size', DEFAULT_GROUP_SIZE),
        groups_per_row=_layout_setting(format_config, 'groups_per_row', DEFAULT_GROUPS_PER_ROW),
    )
    if header:
        return format_header(codec_config.error_rate, codec_config.block_width) + '\n\n' + body
    return body


def decode_artifact_with_report(
    source: Union[str, Sequence[str]],
    config: Optional[Dict[str, Any]] = None,
    repair: Optional[bool] = None
) -> DecodeReport:
    """
    Decode artifact text (or a list of block strings) with statistics.

    The configuration comes from the artifact header when present, otherwise
    from config, otherwise from the bundled defaults. With a header, only
    config['codec']['repair'] is read from config.

    Args:
        source: Full artifact text, or a pre-split list of block strings
        config: Configuration dictionary
        repair: Override config['codec']['repair']

    Returns:
        DecodeReport with payload and per-block results

    Raises:
        ConfigurationError: If the header or configuration is invalid
        RepairExhausted: If any block cannot be recovered
    """
    if isinstance(source, str):
        parsed = split_artifact(source)
    else:
        parsed = split_block_list(source)

    if config is None:
        config = load_config()

    if parsed.has_header:
        error_rate, block_width = parsed.error_rate, parsed.block_width
        configured_repair = bool(get_section(config, 'codec').get('repair', True))
        logger.info("Detected configuration: error_rate=%s, block_width=%d", error_rate, block_width)
    else:
        codec_config = CodecConfig.from_dict(config)
        error_rate, block_width = codec_config.error_rate, codec_config.block_width
        configured_repair = codec_config.repair

    codec = BlockCodec(
        error_rate,
        block_width,
        repair=configured_repair if repair is None else repair,
    )
    return codec.decode_with_report(parsed.blocks)


def decode_artifact(
    source: Union[str, Sequence[str]],
    config: Optional[Dict[str, Any]] = None,
    repair: Optional[bool] = None
) -> bytes:
    """Decode artifact text (or a list of block strings) into the payload."""
    return decode_artifact_with_report(source, config=config, repair=repair).payload
