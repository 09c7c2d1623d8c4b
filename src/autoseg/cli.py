"""Command-line interface for the autoseg segmentation engine."""

import argparse
import sys
from pathlib import Path

from autoseg.config.loader import load_config, ConfigLoadError
from autoseg.config.schema import SegmenterConfig
from autoseg.core.util import safe_json
from autoseg.examples.utils import SAMPLES, SimpleConsoleLogger
from autoseg.providers.checked import BoundaryContractError
from autoseg.runtime.engine import Segmenter


def _read_document(args) -> str:
    if args.sample:
        return SAMPLES[args.sample]
    if args.input is None:
        return SAMPLES["pali"]
    if args.input == "-":
        return sys.stdin.read()
    return Path(args.input).read_text(encoding="utf-8")


def _render_text(result) -> str:
    lines = []
    for index, sentence in enumerate(result.sentences, start=1):
        lines.append(f"[{index}] @{sentence.offset}: {sentence.text}")
        for token in sentence.tokens:
            lines.append(f"    {token.id:>5} {token.offset:>7} {token.kind.label:<15} {token.text}")
    return "\n".join(lines)


def segment_command(args):
    """Segment a document and print the result."""
    try:
        config = load_config(args.config) if args.config else SegmenterConfig()
        if args.rules:
            config = config.model_copy(update={"backend": "rules"})

        logger = SimpleConsoleLogger(stream=sys.stderr) if args.verbose else None
        segmenter = Segmenter(config=config, logger=logger)

        document = _read_document(args)
        result = segmenter.segment(document)

        if args.format == "json":
            print(safe_json(result))
        else:
            if not result.sentences:
                print("(no sentences)")
            else:
                print(_render_text(result))
        return 0

    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1
    except BoundaryContractError as e:
        print(f"❌ Boundary oracle error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read input: {e}", file=sys.stderr)
        return 1


def validate_config_command(args):
    """Validate a segmenter config file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1
        
        print(f"Validating config: {config_path}")
        config = load_config(config_path)
        
        print("✅ Config validation successful!")
        print(f"   Version: {config.version}")
        print(f"   Backend: {config.backend}")
        print(f"   List markers: max_length={config.list_markers.max_length}, "
              f"terminators={config.list_markers.terminators!r}")
        print(f"   Abbreviations: max_length={config.abbreviations.max_length}, "
              f"terminator={config.abbreviations.terminator!r}")
        
        if args.verbose:
            print(f"\n   Openers: {config.list_markers.openers!r}")
            print(f"   Validate boundaries: {config.validate_boundaries}")
        
        return 0
        
    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def info_command(args):
    """Display autoseg version and system information."""
    print("autoseg CLI")
    print("=" * 50)
    
    try:
        import importlib.metadata
        version = importlib.metadata.version("autoseg")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")
    
    print(f"Python: {sys.version.split()[0]}")

    import unicodedata
    print(f"Unicode database: {unicodedata.unidata_version}")
    
    print("\nBoundary backends:")
    
    try:
        import uniseg
        print(f"   ✅ uax29 (uniseg): {getattr(uniseg, '__version__', 'installed')}")
    except ImportError:
        print("   ❌ uax29 (uniseg): not installed")
    
    try:
        import regex
        print(f"   ✅ rules (regex): {regex.__version__}")
    except ImportError:
        print("   ❌ rules (regex): not installed")
    
    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="autoseg",
        description="Multi-script sentence and token segmentation"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Segment a document into sentences and tokens"
    )
    segment_parser.add_argument(
        "input",
        nargs="?",
        help="Path to a UTF-8 text file, or '-' for stdin (default: sample Pali passage)"
    )
    segment_parser.add_argument(
        "--sample",
        choices=sorted(SAMPLES),
        help="Segment a built-in sample document instead of a file"
    )
    segment_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    segment_parser.add_argument(
        "-c", "--config",
        help="Path to a segmenter config YAML file"
    )
    segment_parser.add_argument(
        "--rules",
        action="store_true",
        help="Use the rule-based boundary backend instead of UAX #29"
    )
    segment_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log engine events to stderr"
    )
    
    # Validate command
    validate_parser = subparsers.add_parser(
        "validate-config",
        help="Validate a segmenter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show all settings"
    )
    
    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    if args.command == "segment":
        return segment_command(args)
    elif args.command == "validate-config":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
