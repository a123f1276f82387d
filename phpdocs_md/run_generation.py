"""Orchestration logic for generating Markdown from PHP declarations."""

import argparse
import logging
import sys
from pathlib import Path

from phpdocs_md.build_table_generator import build_table_generator
from phpdocs_md.class_resolver import ClassResolver
from phpdocs_md.document_assembler import DocumentAssembler
from phpdocs_md.errors import UnknownTypeError
from phpdocs_md.find_classes_in_dir import find_classes_in_dir
from phpdocs_md.generator_options import GeneratorOptions, split_list
from phpdocs_md.load_config import load_config
from phpdocs_md.signature_registry import SignatureRegistry

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    options = build_options(args)
    # Validated before any source is parsed.
    table_generator = build_table_generator(options.table_generator)

    registry = SignatureRegistry()
    for source in args.source or []:
        registry.load_path(Path(source), options.ignore)

    collection, requesting_one_class = collect_classes(
        args.target, registry, options.ignore
    )

    resolver = ClassResolver(
        registry,
        visibility_filter=options.visibility,
        method_regex=options.method_regex,
        native_classes=options.native_classes,
        guess_return_types=options.guess_return_type,
    )
    assembler = DocumentAssembler(
        resolver,
        table_generator,
        include_see=options.include_see,
        no_internal=options.no_internal,
        external_url_template=options.external_url_template,
    )
    markdown = assembler.assemble(collection, requesting_one_class=requesting_one_class)
    _write_output(markdown, args.output)
    return 0


def build_options(args: argparse.Namespace) -> GeneratorOptions:
    """Merge the config file with command line overrides."""
    config = load_config(args.config)
    if args.visibility:
        config["visibility"] = split_list(args.visibility)
    if args.method_regex:
        config["method_regex"] = args.method_regex
    if args.table_generator:
        config["table_generator"] = args.table_generator
    if args.ignore:
        config["ignore"] = split_list(args.ignore)
    if args.see:
        config["include_see"] = True
    if args.no_internal:
        config["no_internal"] = True
    return GeneratorOptions.from_config(config)


def collect_classes(
    target: str,
    registry: SignatureRegistry,
    ignores: list[str],
) -> tuple[dict[str, list[str]], bool]:
    """Turn the target argument into namespace-grouped names.

    Returns the collection and whether exactly one class was requested.
    Raises UnknownTypeError when the target is neither a loaded type nor a path.
    """
    if "," in target:
        names = []
        for name in split_list(target):
            if registry.has(name):
                names.append(name)
            else:
                logger.warning("Skipping unknown type %s", name)
        return {"": names}, False

    if registry.has(target):
        return {"": [target]}, True

    path = Path(target)
    if path.exists():
        return find_classes_in_dir(path, registry, ignores), False

    raise UnknownTypeError(target)


def _write_output(markdown: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(markdown)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markdown, encoding="utf-8")
    logger.info("Wrote documentation to %s", output)
