"""Command-line interface for the asset module generator.

This module provides the CLI entry point for generating Python modules
that embed (or reference) the files of one or more input directories.
"""

import argparse
import sys

from . import __version__
from .core.types import Asset, Config, InputConfig
from .core.validator import validate_config_with_error_details
from .pipeline import BindataPipeline
from .scanner import clean_path

# Input suffix that marks an input directory as recursive
RECURSIVE_SUFFIX = "/..."


def parse_input(path: str) -> InputConfig:
    """Parse an input argument; a trailing "/..." means recursive.

    Example:
        "assets/..." -> InputConfig(path="assets", recursive=True)
    """
    if path.endswith(RECURSIVE_SUFFIX):
        return InputConfig(path=clean_path(path[: -len(RECURSIVE_SUFFIX)]), recursive=True)
    return InputConfig(path=clean_path(path), recursive=False)


def parse_int(value: str) -> int:
    """Parse an integer with an optional 0o, 0x or 0b base prefix."""
    return int(value, 0)


def generate_bindata(config: Config) -> list[Asset]:
    """Discover assets and write the generated module.

    Args:
        config: A validated translation configuration

    Returns:
        The catalog that was written

    Raises:
        OSError: If discovery or writing fails
        ValueError: If an asset name is invalid
    """
    pipeline = BindataPipeline(config)

    for input_config in config.input:
        suffix = " (recursive)" if input_config.recursive else ""
        print(f"Scanning: {input_config.path}{suffix}", file=sys.stderr)

    toc = pipeline.find_assets()
    print(f"Found {len(toc)} assets", file=sys.stderr)

    pipeline.write(toc)
    print(f"Wrote {config.output} ({pipeline.config.writer_name} mode)", file=sys.stderr)

    return toc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asset-bindata",
        description="Generate a Python module that embeds the given files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Embed a single directory
  asset-bindata -o myapp/bindata.py data/

  # Embed a directory tree, naming assets relative to it
  asset-bindata --prefix data -o myapp/bindata.py data/...

  # Read files from disk while developing, skipping editor backups
  asset-bindata --debug --ignore '~$' -o myapp/bindata.py data/...
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="input",
        help='File or directory to include; append "/..." to include subdirectories',
    )

    parser.add_argument(
        "-o", "--output", default="./bindata.py", help="Generated module (default: ./bindata.py)"
    )

    parser.add_argument("--prefix", default="", help="Path prefix to strip from asset names")

    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        help="Regular expression for paths to skip (repeatable)",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Read assets from their absolute paths at runtime"
    )

    parser.add_argument(
        "--dev",
        action="store_true",
        help="Read assets relative to the generated module's root_dir at runtime",
    )

    parser.add_argument(
        "--nocompress", action="store_true", help="Embed assets without gzip compression"
    )

    parser.add_argument(
        "--nometadata", action="store_true", help="Do not record file size, mode or modification time"
    )

    parser.add_argument(
        "--mode",
        type=parse_int,
        default=0,
        help="Override the recorded file mode, e.g. 0o644",
    )

    parser.add_argument(
        "--modtime", type=int, default=0, help="Override the recorded modification time (unix seconds)"
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the generator."""
    args = build_parser().parse_args(argv)

    config = Config(
        input=[parse_input(path) for path in args.inputs],
        output=args.output,
        prefix=args.prefix,
        ignore=args.ignore,
        debug=args.debug,
        dev=args.dev,
        no_compress=args.nocompress,
        no_metadata=args.nometadata,
        mode=args.mode,
        mod_time=args.modtime,
    )

    is_valid, error_msg = validate_config_with_error_details(config)
    if not is_valid:
        print("Error: Invalid configuration:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        sys.exit(1)

    try:
        generate_bindata(config)
    except (OSError, ValueError, SyntaxError) as e:
        print(f"Error: Failed to generate module: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
