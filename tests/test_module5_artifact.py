# file: tests/test_module5_artifact.py

"""
Unit tests for Module 5: Artifact Text Format.

Test coverage:
    - "#RS:" header rendering and parsing
    - Raw and labelled layouts
    - Artifact splitting (raw lines, "Block #N" sections, block lists)
    - Encode/decode through artifact text, including header detection
"""

import pytest

from src.module1_params import ConfigurationError
from src.module3_rs.testing_utils import delete_character
from src.module4_blocks import BlockCodec, RepairExhausted
from src.module5_artifact import (
    HEADER_PREFIX,
    decode_artifact,
    decode_artifact_with_report,
    encode_artifact,
    format_blocks,
    format_header,
    is_header,
    parse_header,
    render_artifact,
    split_artifact,
    split_block_list,
)


def _config(error_rate=0.2, block_width=30, repair=True):
    return {
        'codec': {'error_rate': error_rate, 'block_width': block_width, 'repair': repair},
        'format': {'group_size': 5, 'groups_per_row': 4},
    }


class TestHeader:
    """Test the configuration header line."""

    def test_format(self):
        assert format_header(0.2, 200) == "#RS:0.2:200"
        assert format_header(0.25, 40).startswith(HEADER_PREFIX)

    def test_parse(self):
        assert parse_header("#RS:0.2:200") == (0.2, 200)
        assert parse_header("  #RS:0.25:40 \n") == (0.25, 40)

    def test_parse_exponent(self):
        assert parse_header(format_header(1e-05, 10)) == (1e-05, 10)

    def test_is_header(self):
        assert is_header("#RS:0.2:200")
        assert is_header("   #RS:")
        assert not is_header("JBUQ====")

    @pytest.mark.parametrize("line", [
        "JBUQ====",
        "#RS:0.2",
        "#RS:0.2:200:1",
        "#RS:abc:200",
        "#RS:0.2:2.5",
    ])
    def test_malformed(self, line):
        with pytest.raises(ConfigurationError):
            parse_header(line)


class TestLayout:
    """Test raw and labelled rendering."""

    def test_render_with_header(self):
        text = render_artifact(["AAAA", "BBBB"], 0.2, 10)
        assert text == "#RS:0.2:10\nAAAA\nBBBB"

    def test_render_without_header(self):
        assert render_artifact(["AAAA", "BBBB"], 0.2, 10, header=False) == "AAAA\nBBBB"

    def test_format_blocks_groups_and_rows(self):
        block = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        text = format_blocks([block, "JBUQ===="])
        assert text == (
            "Block #0\n"
            "ABCDE-FGHIJ-KLMNO-PQRST\n"
            "UVWXY-Z\n"
            "\n"
            "Block #1\n"
            "JBUQ=-==="
        )

    def test_format_blocks_skips_header(self):
        text = format_blocks(["#RS:0.2:10", "JBUQ"], group_size=2, groups_per_row=2)
        assert text == "Block #0\nJB-UQ"

    def test_format_blocks_invalid_grouping(self):
        with pytest.raises(ValueError):
            format_blocks(["JBUQ"], group_size=0)


class TestSplitArtifact:
    """Test splitting artifact text into block tokens."""

    def test_raw_mode(self):
        parsed = split_artifact("#RS:0.2:10\nJBUQ-AAAA\n\n  mfrg gzdf \n")
        assert parsed.has_header
        assert (parsed.error_rate, parsed.block_width) == (0.2, 10)
        assert parsed.blocks == ["JBUQAAAA", "mfrggzdf"]

    def test_raw_mode_without_header(self):
        parsed = split_artifact("JBUQ\nMFRG\n")
        assert not parsed.has_header
        assert parsed.blocks == ["JBUQ", "MFRG"]

    def test_raw_mode_exponent_header(self):
        parsed = split_artifact("#RS:1e-05:10\nJBUQ\n")
        assert parsed.error_rate == 1e-05
        assert parsed.blocks == ["JBUQ"]

    def test_formatted_mode(self):
        text = "#RS:0.2:30\n\nBlock #0\nABCDE-FGHIJ\nKL\n\nBlock #1\nMNOPQ - RS\n"
        parsed = split_artifact(text)
        assert (parsed.error_rate, parsed.block_width) == (0.2, 30)
        assert parsed.blocks == ["ABCDEFGHIJKL", "MNOPQRS"]

    def test_formatted_mode_without_header(self):
        parsed = split_artifact("Block #0\nABCDE\nBlock #1\nFGHIJ")
        assert not parsed.has_header
        assert parsed.blocks == ["ABCDE", "FGHIJ"]

    def test_malformed_header(self):
        with pytest.raises(ConfigurationError):
            split_artifact("#RS:nope:10\nJBUQ\n")

    def test_empty(self):
        parsed = split_artifact("\n  \n")
        assert parsed.blocks == []
        assert not parsed.has_header

    def test_block_list(self):
        parsed = split_block_list(["#RS:0.2:10", "JBUQ-AAAA", "", "  ", "MFRG\n"])
        assert (parsed.error_rate, parsed.block_width) == (0.2, 10)
        assert parsed.blocks == ["JBUQAAAA", "MFRG"]


class TestArtifactRoundTrip:
    """decode_artifact(encode_artifact(P)) == P."""

    @pytest.mark.parametrize("formatted", [False, True])
    @pytest.mark.parametrize("header", [False, True])
    def test_roundtrip_with_config(self, formatted, header):
        payload = bytes((i * 17 + 3) % 256 for i in range(75))
        config = _config()
        text = encode_artifact(payload, config, formatted=formatted, header=header)
        assert decode_artifact(text, config) == payload

    def test_roundtrip_default_config(self):
        payload = b"The quick brown fox jumps over the lazy dog. " * 6
        text = encode_artifact(payload)
        assert text.splitlines()[0] == "#RS:0.2:200"
        assert decode_artifact(text) == payload

    def test_formatted_layout(self):
        text = encode_artifact(b"x" * 40, _config(), formatted=True)
        lines = text.splitlines()
        assert lines[0] == "#RS:0.2:30"
        assert lines[1] == ""
        assert lines[2] == "Block #0"
        assert "Block #2" in lines
        assert all(len(group) <= 5 for group in lines[3].split('-'))

    def test_header_overrides_config(self):
        payload = b"header wins over configuration"
        text = encode_artifact(payload, _config(0.25, 40))
        # Decoding config differs; the header supplies the real one
        report = decode_artifact_with_report(text, _config(0.2, 200))
        assert report.payload == payload

    def test_config_used_without_header(self):
        payload = b"no header present"
        text = encode_artifact(payload, _config(0.25, 40), header=False)
        assert decode_artifact(text, _config(0.25, 40)) == payload

    def test_block_list_source(self):
        payload = b"list of blocks"
        blocks = BlockCodec(0.2, 30).encode(payload)
        assert decode_artifact(["#RS:0.2:30"] + blocks) == payload

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigurationError):
            encode_artifact(b"x", _config(0.6, 10))

    def test_invalid_header_configuration(self):
        with pytest.raises(ConfigurationError):
            decode_artifact("#RS:0.6:10\nJBUQ\n")

    def test_header_ignores_invalid_config(self):
        payload = b"hello"
        text = encode_artifact(payload, _config(0.25, 40))
        assert decode_artifact(text, {'codec': {'error_rate': 0.6, 'block_width': 10}}) == payload

    def test_header_with_partial_config(self):
        payload = b"hello"
        text = encode_artifact(payload, _config(0.25, 40))
        assert decode_artifact(text, {'codec': {'repair': False}}) == payload
        assert decode_artifact(text, {}) == payload

    def test_header_keeps_repair_setting(self):
        text = encode_artifact(bytes(range(1, 19)), _config())
        lines = text.splitlines()
        lines[1] = delete_character(lines[1], 7)

        with pytest.raises(RepairExhausted):
            decode_artifact('\n'.join(lines), {'codec': {'repair': False}})

    def test_header_with_malformed_codec_section(self):
        text = encode_artifact(b"hello", _config())
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            decode_artifact(text, {'codec': [0.2, 30]})


class TestLayoutConfig:
    """Print layout settings from the format section."""

    @pytest.mark.parametrize("value", ["5", 0, -1, True, 2.5])
    def test_invalid_group_size(self, value):
        config = _config()
        config['format']['group_size'] = value
        with pytest.raises(ConfigurationError, match="group_size"):
            encode_artifact(b"x", config, formatted=True)

    def test_invalid_groups_per_row(self):
        config = _config()
        config['format']['groups_per_row'] = "4"
        with pytest.raises(ConfigurationError, match="groups_per_row"):
            encode_artifact(b"x", config, formatted=True)

    def test_format_section_not_a_mapping(self):
        config = _config()
        config['format'] = "dashes"
        with pytest.raises(ConfigurationError):
            encode_artifact(b"x", config, formatted=True)

    def test_missing_format_section_uses_defaults(self):
        config = {'codec': {'error_rate': 0.2, 'block_width': 30}}
        text = encode_artifact(bytes(range(18)), config, formatted=True)
        rows = text.split("Block #0\n")[1].splitlines()
        assert rows[0].count('-') == 3
        assert all(len(group) == 5 for group in rows[0].split('-'))


class TestArtifactDamage:
    """Transcription damage inside artifact text."""

    def test_deleted_character_in_formatted_artifact(self):
        payload = bytes((i * 29 + 1) % 256 for i in range(18))
        text = encode_artifact(payload, _config(), formatted=True)

        label = "Block #0\n"
        start = text.index(label) + len(label)
        damaged = delete_character(text, start + 3)

        report = decode_artifact_with_report(damaged)
        assert report.payload == payload
        assert report.blocks[0].repaired_at is not None
        assert report.num_repaired == 1

    def test_repair_disabled_by_argument(self):
        payload = bytes(range(1, 19))
        text = encode_artifact(payload, _config())
        lines = text.splitlines()
        lines[1] = delete_character(lines[1], 7)

        with pytest.raises(RepairExhausted):
            decode_artifact('\n'.join(lines), repair=False)

    def test_repair_disabled_by_config(self):
        payload = bytes(range(1, 19))
        text = encode_artifact(payload, _config(), header=False)
        damaged = delete_character(text, 7)

        with pytest.raises(RepairExhausted):
            decode_artifact(damaged, _config(repair=False))
