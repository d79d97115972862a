# file: src/module5_artifact/__init__.py

"""
Module 5: Artifact Text Format

Renders block sequences as line-oriented artifacts (optional "#RS:" header,
raw or labelled print layout) and parses pasted or retyped artifacts back
into block tokens.

Public API:
    - encode_artifact(payload, config, formatted=False, header=True) -> str
    - decode_artifact(text_or_blocks, config=None) -> bytes
"""

from .artifact import (
    ParsedArtifact,
    format_header,
    parse_header,
    is_header,
    render_artifact,
    format_blocks,
    split_artifact,
    split_block_list,
    encode_artifact,
    decode_artifact,
    decode_artifact_with_report,
    HEADER_PREFIX,
)

__version__ = "1.0.0"

__all__ = [
    "ParsedArtifact",
    "format_header",
    "parse_header",
    "is_header",
    "render_artifact",
    "format_blocks",
    "split_artifact",
    "split_block_list",
    "encode_artifact",
    "decode_artifact",
    "decode_artifact_with_report",
    "HEADER_PREFIX",
]
