"""Command-line interface for Monkey."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monkey.repl import MODES, PROMPT

BANNER = "Welcome to the Monkey programming language!"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    prompt: str
    mode: str
    tokens: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey lexer and parser. Without FILE, start the interactive prompt.",
    )
    p.add_argument("input", nargs="?", help="Monkey source file to check")
    p.add_argument("--tokens", action="store_true", default=None, help="Print the token stream")
    p.add_argument("--debug", action="store_true", default=None, help="Dump AST to stderr")
    p.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Interactive prompt mode (default: tokens)",
    )
    p.add_argument("--prompt", default=None, metavar="TEXT", help="Interactive prompt string")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkey.toml)",
    )
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    A missing auto-discovered monkey.toml yields an empty dict; an explicit
    *config_path* that does not exist raises FileNotFoundError.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise FileNotFoundError(f"no such config file: {config_path}")
        path = config_path
    else:
        path = search_dir / "monkey.toml"
        if not path.is_file():
            return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _config_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(f"config: [{name}] must be a table")
    return section


def _config_bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise argparse.ArgumentTypeError(f"config: {key} must be true or false")
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    if input_file is not None:
        search_dir = input_file.parent
        if not search_dir.parts:
            search_dir = Path(".")
    else:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, search_dir)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as exc:
        raise argparse.ArgumentTypeError(f"config: {exc}") from exc

    repl_cfg = _config_section(config, "repl")
    output_cfg = _config_section(config, "output")

    # Prompt: default < config < CLI
    prompt = repl_cfg.get("prompt", PROMPT)
    if not isinstance(prompt, str):
        raise argparse.ArgumentTypeError("config: prompt must be a string")
    if args.prompt is not None:
        prompt = args.prompt

    # Mode: default < config < CLI
    mode = repl_cfg.get("mode", "tokens")
    if mode not in MODES:
        raise argparse.ArgumentTypeError(
            f"config: mode must be one of {', '.join(MODES)} (got {mode!r})"
        )
    if args.mode is not None:
        mode = args.mode

    tokens = _config_bool(output_cfg, "tokens", False)
    if args.tokens is not None:
        tokens = args.tokens

    debug = _config_bool(output_cfg, "debug", False)
    if args.debug is not None:
        debug = args.debug

    return CliOptions(
        input_file=input_file,
        prompt=prompt,
        mode=mode,
        tokens=tokens,
        debug=debug,
    )


def check_file(options: CliOptions) -> int:
    """Lex and parse a file, print the result, and return the exit code."""
    from monkey.debug import dump_program
    from monkey.lexer import Lexer
    from monkey.parser import Parser

    if options.input_file is None:
        raise ValueError("check_file requires an input file")
    source = options.input_file.read_text(encoding="utf-8")
    filename = str(options.input_file)

    if options.tokens:
        for tok in Lexer(source):
            sys.stdout.write(f"{tok!r}\n")

    lexer = Lexer(source)
    parser = Parser(lexer)
    program = parser.parse()

    if options.debug:
        dump_program(program, file=sys.stderr)

    if not options.tokens:
        for stmt in program.statements:
            sys.stdout.write(f"{stmt}\n")

    errors = [*lexer.errors, *parser.errors]
    for err in errors:
        print(err.format(filename), file=sys.stderr)

    return 1 if errors else 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.input_file is None:
        from monkey.repl import start

        print(BANNER)
        start(sys.stdin, sys.stdout, prompt=options.prompt, mode=options.mode)
        return 0

    try:
        return check_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2
