"""Main CLI entry point for pyd2proto."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..config import ProtoOptions
from ..exceptions import Pyd2ProtoError
from ..protobuf import to_proto_schema
from .loader import load_models, select_model


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the pyd2proto CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="pyd2proto",
        description="pyd2proto: Pydantic to Protocol Buffers schema compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pyd2proto models.py                           Compile the only model in models.py
  pyd2proto models.py --model User -o user.proto
  pyd2proto models.py --package fleet.v1 --type-prefix Fleet
        """,
    )

    parser.add_argument("file", metavar="FILE", type=str, help="Python file defining Pydantic models")
    parser.add_argument("--model", metavar="NAME", help="Name of the model to compile")
    parser.add_argument("--package", default="default", help="Protobuf package name")
    parser.add_argument("--root-message", default="Message", help="Name of the root message")
    parser.add_argument("--type-prefix", default="", help="Prefix for generated type names")
    parser.add_argument(
        "--qualify-names",
        action="store_true",
        help="Name nested types after their full field path",
    )
    parser.add_argument("-o", "--output", metavar="OUT", help="Write the schema to OUT instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"pyd2proto {__version__}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        model = select_model(load_models(file_path), args.model)
        options = ProtoOptions(
            package_name=args.package,
            root_message_name=args.root_message,
            type_prefix=args.type_prefix,
            qualify_names=args.qualify_names,
        )
        proto = to_proto_schema(model, options)
    except (Pyd2ProtoError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(proto + "\n")
    else:
        print(proto)
    return 0


if __name__ == "__main__":
    sys.exit(main())
