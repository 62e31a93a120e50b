"""Command-line interface for the Hyper layer compiler."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import LayersFile, load_layers_file
from .document import build_document
from .exceptions import ConfigError
from .keycodes import KEY_CODES
from .registry import collect_sublayer_variables


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="hyper_layers",
        description="Compile Hyper key sublayers into Karabiner-Elements rules",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- compile subcommand ---
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile a layers YAML file into a complex-modifications JSON file",
    )
    compile_parser.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="Layers definition YAML file",
    )
    compile_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output JSON file (default: stdout)",
    )
    compile_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent (default: 2)",
    )

    # --- variables subcommand ---
    variables_parser = subparsers.add_parser(
        "variables",
        help="List the sublayer state variables of a layers file",
    )
    variables_parser.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="Layers definition YAML file",
    )

    # --- keys subcommand ---
    subparsers.add_parser(
        "keys",
        help="List recognized key codes",
    )

    return parser


def _load(path: Path) -> LayersFile | None:
    if not path.exists():
        print(f"Error: Layers file not found: {path}", file=sys.stderr)
        return None
    try:
        return load_layers_file(path)
    except (ConfigError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def cmd_compile(args: argparse.Namespace) -> int:
    """Execute compile subcommand."""
    layers_file = _load(args.input)
    if layers_file is None:
        return 1

    try:
        document = build_document(layers_file)
    except (ConfigError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = json.dumps(document, indent=args.indent, ensure_ascii=False)
    if args.output is None:
        print(output)
        return 0

    args.output.write_text(output + "\n", encoding="utf-8")
    print(f"Wrote {len(document['rules'])} rules to {args.output}")
    return 0


def cmd_variables(args: argparse.Namespace) -> int:
    """Execute variables subcommand."""
    layers_file = _load(args.input)
    if layers_file is None:
        return 1

    try:
        layers = layers_file.binding_map()
    except (ConfigError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    variables = collect_sublayer_variables(layers, layers_file.compiler.variable_prefix)
    print(f"Master variable: {layers_file.compiler.master_variable}")
    print("Sublayer variables:")
    for name in variables:
        print(f"  - {name}")
    return 0


def cmd_keys(args: argparse.Namespace) -> int:
    """Execute keys subcommand."""
    for key_code in sorted(KEY_CODES):
        print(key_code)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "compile":
        sys.exit(cmd_compile(args))
    elif args.command == "variables":
        sys.exit(cmd_variables(args))
    elif args.command == "keys":
        sys.exit(cmd_keys(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
