"""
Command-line interface for sudachi-vibrato-converter.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from sudachi_vibrato_converter import __version__
from sudachi_vibrato_converter.exceptions import (
    ConverterError,
    MalformedRowError,
    ManifestError,
)
from sudachi_vibrato_converter.manifest import ConversionManifest, load_manifest
from sudachi_vibrato_converter.pipeline import ConversionResult, run_conversion

PATH_OPTIONS = (
    "lex_in", "lex_out", "lex_append",
    "unk_in", "unk_out", "unk_append",
    "char_in", "char_out", "char_append",
    "stats_out",
    "rewrite_in", "rewrite_out", "rewrite_append",
)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the sudachi-vibrato-converter CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sudachi-vibrato-converter",
        description="Convert SudachiDict resources to Vibrato/jpreprocess-compatible format",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert lexicon, unknown-word table and char.def",
    )
    convert_parser.add_argument(
        "--config",
        help="YAML manifest naming all inputs and outputs (replaces the path options)",
    )
    for name, label in (
        ("lex", "lexicon CSV"),
        ("unk", "unknown-word definition"),
        ("char", "character definition"),
    ):
        convert_parser.add_argument(f"--{name}-in", help=f"Sudachi {label}")
        convert_parser.add_argument(f"--{name}-out", help=f"Converted {label}")
        convert_parser.add_argument(
            f"--{name}-append",
            action="append",
            default=[],
            metavar="PATH",
            help=f"Fragment appended to the converted {label} (repeatable)",
        )
    convert_parser.add_argument("--stats-out", help="Statistics file (key=value lines)")
    convert_parser.add_argument("--rewrite-in", help="rewrite.def to copy")
    convert_parser.add_argument("--rewrite-out", help="Destination for rewrite.def")
    convert_parser.add_argument(
        "--rewrite-append",
        action="append",
        default=[],
        metavar="PATH",
        help="Fragment appended to rewrite.def (repeatable)",
    )
    convert_parser.set_defaults(func=cmd_convert)

    return parser


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle convert command."""
    try:
        manifest = _manifest_from_args(args)
    except ManifestError as e:
        print(f"\n  [CONFIG ERROR] {e}")
        if e.line:
            print(f"                Line: {e.line}")
        return 1
    except FileNotFoundError as e:
        print(f"\n  [ERROR] {e}")
        return 1

    try:
        result = run_conversion(manifest)
    except MalformedRowError as e:
        print(f"\n  [ROW ERROR] {e}")
        return 1
    except (ConverterError, OSError) as e:
        print(f"\n  [ERROR] {e}")
        return 1

    _print_result(manifest, result)
    return 0


def _manifest_from_args(args: argparse.Namespace) -> ConversionManifest:
    """Build a manifest from --config or from the individual path options."""
    if args.config:
        given = [
            "--" + name.replace("_", "-")
            for name in PATH_OPTIONS
            if getattr(args, name)
        ]
        if given:
            raise ManifestError(f"--config cannot be combined with {', '.join(given)}")
        return load_manifest(args.config)

    rewrite_paths = (args.rewrite_in, args.rewrite_out)
    if any(rewrite_paths) and not all(rewrite_paths):
        raise ManifestError("--rewrite-in and --rewrite-out must be given together")
    if args.rewrite_append and not all(rewrite_paths):
        raise ManifestError("--rewrite-append requires --rewrite-in and --rewrite-out")

    data: Dict[str, Any] = {
        "lexicon": _section(args.lex_in, args.lex_out, args.lex_append, "lex"),
        "unknown": _section(args.unk_in, args.unk_out, args.unk_append, "unk"),
        "char": _section(args.char_in, args.char_out, args.char_append, "char"),
        "stats": args.stats_out,
    }
    if args.rewrite_in:
        data["rewrite"] = _section(
            args.rewrite_in, args.rewrite_out, args.rewrite_append, "rewrite"
        )
    if not data["stats"]:
        raise ManifestError("--stats-out is required")
    return load_manifest(data)


def _section(input_path, output_path, append, option: str) -> Dict[str, Any]:
    if not input_path or not output_path:
        raise ManifestError(f"--{option}-in and --{option}-out are required")
    return {"input": input_path, "output": output_path, "append": list(append)}


def _print_result(manifest: ConversionManifest, result: ConversionResult) -> None:
    """Print the conversion summary."""
    print("\nResults:")
    for key, value in result.stats.as_dict().items():
        print(f"  {key + ':':<28} {value}")
    print(f"  {'time:':<28} {result.duration_seconds:.2f}s")
    print(f"\nStats written to {manifest.stats}")


if __name__ == "__main__":
    sys.exit(main())
