"""Command-line interface for arithlex."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from arithlex.errors import LexError
from arithlex.tokens import Position, Token

SAMPLE_SOURCE = "var x = 42 + 3 * (y - 5)"

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    expr: str | None
    strict: bool
    output_format: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="arithlex",
        description="Scan arithmetic expressions into tokens",
    )
    p.add_argument(
        "input",
        nargs="?",
        help="Input file, or - for stdin (default: built-in sample expression)",
    )
    p.add_argument("-e", "--expr", metavar="TEXT", help="Scan TEXT instead of a file")
    p.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail on unexpected characters instead of stopping silently",
    )
    p.add_argument("--json", action="store_true", help="Print tokens as JSON")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover arithlex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump token positions to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "arithlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    if input_file is not None and args.input != "-" and input_file.parent.parts:
        input_dir = input_file.parent
    else:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.is_file():
        raise argparse.ArgumentTypeError(f"config file not found: {config_path}")
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Strict mode: config < CLI
    strict = False
    cfg_scan = config.get("scan")
    if isinstance(cfg_scan, dict):
        cfg_strict = cfg_scan.get("strict")
        if isinstance(cfg_strict, bool):
            strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in OUTPUT_FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected text or json): {cfg_format}"
                )
            output_format = cfg_format
    if args.json:
        output_format = "json"

    return CliOptions(
        input_file=input_file,
        expr=args.expr,
        strict=strict,
        output_format=output_format,
        debug=args.debug,
    )


def read_source(options: CliOptions) -> tuple[str, str]:
    """Return (source, display filename) for the selected input."""
    if options.expr is not None:
        return options.expr, "<expr>"
    if options.input_file is None:
        return SAMPLE_SOURCE, "<sample>"
    if str(options.input_file) == "-":
        return sys.stdin.read(), "<stdin>"
    return options.input_file.read_text(encoding="utf-8"), str(options.input_file)


def scan_source(source: str, *, strict: bool = False) -> tuple[list[Token], Position | None]:
    """Scan source and return (tokens without EOF, position where scanning halted)."""
    from arithlex.lexer import Scanner

    scanner = Scanner(source, strict=strict)
    tokens = list(scanner)
    return tokens, scanner.halted_at


def format_tokens(tokens: list[Token], output_format: str = "text") -> str:
    """Render tokens for stdout in the requested format."""
    if output_format == "json":
        records = [
            {
                "type": tok.type.name,
                "lexeme": tok.lexeme,
                "line": tok.position.line,
                "column": tok.position.column,
            }
            for tok in tokens
        ]
        return json.dumps(records, indent=2) + "\n"
    return "".join(f"Token: {tok.type.name} {tok.lexeme!r} line {tok.line}\n" for tok in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source, filename = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    try:
        tokens, halted_at = scan_source(source, strict=options.strict)
    except LexError as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1

    if options.debug:
        from arithlex.debug import dump_tokens

        dump_tokens(tokens)

    sys.stdout.write(format_tokens(tokens, options.output_format))

    if halted_at is not None:
        ch = source[halted_at.offset]
        print(
            f"warning: scanning stopped at {filename}:{halted_at.line}:{halted_at.column} "
            f"(unexpected character {ch!r})",
            file=sys.stderr,
        )

    return 0
