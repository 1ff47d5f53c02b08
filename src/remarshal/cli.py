"""
Command-line interface for converting documents between TOML, YAML and JSON.

This module wraps ``remarshal.convert`` with file/stdin handling, format
inference from file extensions and exit codes per error kind.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .codecs import CodecRegistry
from .config import ConversionOptions
from .exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    KeyTypeError,
)
from .formats import Format
from .pipeline import convert

STDIO = "-"

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_DECODE = 2
EXIT_KEY_TYPE = 3
EXIT_ENCODE = 4
EXIT_FILESYSTEM = 5


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    # stdout may carry the converted document
    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,
    )


def resolve_format(name: str | None, path: str, role: str) -> str:
    """
    Return the format name to use for one side of the conversion.

    An explicit ``name`` is upper-cased; otherwise the format is inferred
    from the file extension of ``path``.

    Raises:
        ConfigError: If no name is given and the path gives no hint
    """
    if name:
        return name.strip().upper()

    if path == STDIO:
        raise ConfigError(f"cannot infer {role} format from standard stream")

    try:
        return Format.from_path(path).value
    except ValueError as e:
        raise ConfigError(f"cannot infer {role} format: {e}") from e


def read_input(path: str) -> bytes:
    if path == STDIO:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def write_output(path: str, text: str) -> None:
    if not text.endswith("\n"):
        text += "\n"
    if path == STDIO:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(text, encoding="utf-8")


def show_available_formats() -> None:
    """Print the registered codecs."""
    registry = CodecRegistry()
    print("Available Formats:")
    print("=" * 50)
    for fmt in registry.get_available_formats():
        info = registry.get_codec_info(fmt)
        print(f"  {fmt.value:<6} - {info['description']}")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="remarshal",
        description="Convert between TOML, YAML and JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a file, formats inferred from the extensions
  remarshal config.toml config.json

  # Read YAML from stdin, write TOML to stdout
  cat config.yaml | remarshal -if yaml -of toml

  # Compact, key-sorted JSON
  remarshal --no-indent-json --sort-keys config.yaml out.json
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=STDIO,
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=STDIO,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-if",
        "--input-format",
        dest="input_format",
        metavar="FORMAT",
        help="Input format: toml, yaml or json (default: from the input extension)",
    )
    parser.add_argument(
        "-of",
        "--output-format",
        dest="output_format",
        metavar="FORMAT",
        help="Output format: toml, yaml or json (default: from the output extension)",
    )
    parser.add_argument(
        "--no-indent-json",
        action="store_true",
        help="Write JSON on a single line",
    )
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Sort mapping keys in the output",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List available formats and exit",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging on stderr"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute one conversion and return the process exit code."""
    configure_logging(args.debug, args.verbose)
    logger = logging.getLogger(__name__)

    try:
        input_format = resolve_format(args.input_format, args.input, "input")
        output_format = resolve_format(args.output_format, args.output, "output")
        options = ConversionOptions(
            indent_json=not args.no_indent_json, sort_keys=args.sort_keys
        )

        logger.info(
            f"Converting {args.input} ({input_format}) → "
            f"{args.output} ({output_format})"
        )
        data = read_input(args.input)
        result = convert(data, input_format, output_format, options)
        write_output(args.output, result)
        logger.info("Conversion completed successfully")
        return EXIT_OK

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_CONFIG
    except DecodeError as e:
        logger.error(f"Decode error: {e}")
        return EXIT_DECODE
    except KeyTypeError as e:
        logger.error(f"Key type error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_KEY_TYPE
    except EncodeError as e:
        logger.error(f"Encode error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_ENCODE
    except OSError as e:
        logger.error(f"File system error: {e}")
        return EXIT_FILESYSTEM


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    if args.list_formats:
        show_available_formats()
        sys.exit(EXIT_OK)
    sys.exit(run_conversion(args))


if __name__ == "__main__":
    main()
