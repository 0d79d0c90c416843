"""cd-engine command-line interface.

Usage::

    cd-engine generate component --title "Free Zone" --table --create --filter \\
        --columns "Name, Age, Address"
    python -m cd_engine generate component --title "Orders" -o ./src/app
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from cd_engine import __version__
from cd_engine.config import Config, StyleExtension
from cd_engine.dispatcher import dispatch
from cd_engine.scaffolder import ScaffoldError
from cd_engine.utils import print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cd-engine",
        description="cd-engine -- Angular component scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  cd-engine generate component --title "Free Zone"\n'
            '  cd-engine generate component --title "Free Zone" --table '
            '--create --filter --columns "Name, Age, Address"\n'
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    generate = subparsers.add_parser("generate", help="Generate boilerplate of the given type")
    generate.add_argument("type", help="What to generate (only 'component' is supported)")
    generate.add_argument("--title", default=None, help="Title of the Component")
    generate.add_argument("--table", action="store_true", help="Include Table in the Component")
    generate.add_argument("--columns", default=None, help="Comma-separated list of column names")
    generate.add_argument(
        "--create", action="store_true", help="Include create button in the component"
    )
    generate.add_argument(
        "--filter", action="store_true", help="Include filter button in the component"
    )
    generate.add_argument(
        "--output-dir", "-o",
        default=None,
        help="Directory the component folder is created in (default: current directory)",
    )
    generate.add_argument(
        "--style-ext",
        choices=[ext.value for ext in StyleExtension],
        default=None,
        help="Stylesheet extension (default: scss)",
    )
    generate.add_argument(
        "--stub-columns",
        action="store_true",
        help="Also declare the columns in the generated .ts stub",
    )
    generate.add_argument(
        "--rows",
        type=int,
        default=0,
        help="Blank rows in the .ts stub dataSource (implies --stub-columns)",
    )
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Environment defaults, overridden by explicit flags."""
    config = Config.from_env()
    overrides: dict[str, object] = {
        "stub_columns": args.stub_columns,
        "stub_rows": args.rows,
    }
    if args.output_dir:
        overrides["output_dir"] = Path(args.output_dir)
    if args.style_ext:
        overrides["style_ext"] = args.style_ext
    return Config.model_validate({**config.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``cd-engine`` and ``python -m cd_engine``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        status = dispatch(args.type, args, config)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
