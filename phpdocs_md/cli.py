"""Command line entry point for generating Markdown API documentation."""

import argparse
import logging
import re
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from phpdocs_md.errors import PHPDocsMDError
from phpdocs_md.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="phpdocs-md",
        description="Generate Markdown documentation from PHPDoc comments.",
    )
    ap.add_argument(
        "target",
        help=(
            "Class name, comma-separated list of class names, or source directory"
        ),
    )
    ap.add_argument(
        "-s",
        "--source",
        action="append",
        default=[],
        help=(
            "PHP file, signature manifest or directory to load declarations from "
            "(repeatable)"
        ),
    )
    ap.add_argument(
        "-i",
        "--ignore",
        help="Comma-separated directory names to skip while scanning",
    )
    ap.add_argument(
        "--visibility",
        help=(
            "Comma-separated modifiers of the methods to include "
            "(default: public, protected, abstract, final)"
        ),
    )
    ap.add_argument(
        "--method-regex",
        help="Regular expression method names must match to be included",
    )
    ap.add_argument(
        "--table-generator",
        help="'default', 'columns', or a module:ClassName TableGenerator subclass",
    )
    ap.add_argument(
        "--see",
        action="store_true",
        help="Include @see references in the generated Markdown",
    )
    ap.add_argument(
        "--no-internal",
        action="store_true",
        help="Leave out classes and methods marked @internal",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write to this file instead of standard output",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress and skipped declarations",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except (PHPDocsMDError, OSError, re.error, yaml.YAMLError) as e:
        msg = f"Error: {e}"
        raise SystemExit(msg) from e


if __name__ == "__main__":
    raise SystemExit(main())
