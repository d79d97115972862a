#!/usr/bin/env python3
# file: src/module6_cli/cli.py

"""
Command-line front end for the transcription codec.

Subcommands:
    encode  payload (file, text or stdin) -> artifact text
    decode  artifact text (file or stdin) -> payload bytes
    info    print the block layout for a configuration
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from src.module1_params import CodecConfig, CodecError, get_section, load_config
from src.module4_blocks import RepairExhausted
from src.module5_artifact import decode_artifact_with_report, encode_artifact


EXIT_OK = 0
EXIT_CODEC_ERROR = 2


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(verbose: bool = False, quiet: bool = False):
    """Configure logging for the command-line tool."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )


# =============================================================================
# CONFIGURATION
# =============================================================================

def resolve_config(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Load YAML configuration and apply command-line overrides.

    Args:
        args: Parsed arguments (config, error_rate, block_width, quiet)

    Returns:
        Configuration dictionary
    """
    config = dict(load_config(args.config))
    codec_config = dict(get_section(config, 'codec'))

    if args.error_rate is not None:
        codec_config['error_rate'] = args.error_rate
    if args.block_width is not None:
        codec_config['block_width'] = args.block_width
    if getattr(args, 'no_repair', False):
        codec_config['repair'] = False

    config['codec'] = codec_config

    if get_section(config, 'system').get('verbose') and not args.quiet:
        logging.getLogger().setLevel(logging.DEBUG)
    return config


# =============================================================================
# SUBCOMMANDS
# =============================================================================

def _read_payload(args: argparse.Namespace) -> bytes:
    if args.text is not None:
        return args.text.encode('utf-8')
    if args.input is not None:
        with open(args.input, 'rb') as f:
            return f.read()
    return sys.stdin.buffer.read()


def cmd_encode(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    payload = _read_payload(args)

    artifact = encode_artifact(
        payload,
        config,
        formatted=args.formatted,
        header=not args.no_header,
    )

    if args.output is not None:
        with open(args.output, 'w') as f:
            f.write(artifact + '\n')
        logging.info(f"Wrote {len(payload)} bytes as artifact to {args.output}")
    else:
        print(artifact)
    return EXIT_OK


def cmd_decode(args: argparse.Namespace) -> int:
    config = resolve_config(args)

    if args.input is not None:
        with open(args.input, 'r') as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    report = decode_artifact_with_report(text, config=config)
    logging.info(
        f"Decoded {len(report.blocks)} blocks: {report.num_corrected_symbols} symbols corrected, "
        f"{report.num_repaired} blocks repaired"
    )

    if args.output is not None:
        with open(args.output, 'wb') as f:
            f.write(report.payload)
        logging.info(f"Wrote {len(report.payload)} bytes to {args.output}")
        return EXIT_OK

    try:
        sys.stdout.write(report.payload.decode('utf-8'))
        sys.stdout.flush()
    except UnicodeDecodeError:
        sys.stdout.buffer.write(report.payload)
        sys.stdout.buffer.flush()
    return EXIT_OK


def cmd_info(args: argparse.Namespace) -> int:
    summary = CodecConfig.from_dict(resolve_config(args)).summary()
    for key, value in summary.items():
        if isinstance(value, float):
            print(f"{key}: {value:.4g}")
        else:
            print(f"{key}: {value}")
    return EXIT_OK


# =============================================================================
# COMMAND-LINE INTERFACE
# =============================================================================

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='rs-transcribe',
        description='Encode bytes into hand-transcribable, error-correcting text blocks',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a file for printing
  rs-transcribe encode --input secret.bin --formatted --output blocks.txt

  # Encode a short text with more redundancy
  rs-transcribe encode --text "hello" --error-rate 0.3 --block-width 50

  # Decode a retyped artifact
  rs-transcribe decode --input blocks.txt --output secret.bin
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log errors')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: bundled default_config.yaml)'
    )
    common.add_argument('--error-rate', type=float, default=None, help='Override codec.error_rate')
    common.add_argument('--block-width', type=int, default=None, help='Override codec.block_width')

    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', parents=[common], help='Encode a payload into blocks')
    source = encode.add_mutually_exclusive_group()
    source.add_argument('--input', type=str, default=None, help='Payload file (default: stdin)')
    source.add_argument('--text', type=str, default=None, help='Payload given as UTF-8 text')
    encode.add_argument('--output', type=str, default=None, help='Artifact file (default: stdout)')
    encode.add_argument('--formatted', action='store_true', help='Labelled, dash-grouped print layout')
    encode.add_argument('--no-header', action='store_true', help='Omit the #RS: configuration line')
    encode.set_defaults(handler=cmd_encode)

    decode = subparsers.add_parser('decode', parents=[common], help='Decode blocks into the payload')
    decode.add_argument('--input', type=str, default=None, help='Artifact file (default: stdin)')
    decode.add_argument('--output', type=str, default=None, help='Payload file (default: stdout)')
    decode.add_argument('--no-repair', action='store_true', help='Disable single-deletion repair')
    decode.set_defaults(handler=cmd_decode)

    info = subparsers.add_parser('info', parents=[common], help='Show the block layout')
    info.set_defaults(handler=cmd_info)

    return parser.parse_args(argv)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line tool."""
    args = parse_arguments(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        return args.handler(args)
    except RepairExhausted as e:
        print(f"error: block {e.block_index} could not be recovered: {e.cause}", file=sys.stderr)
        return EXIT_CODEC_ERROR
    except CodecError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CODEC_ERROR


if __name__ == '__main__':
    sys.exit(main())
