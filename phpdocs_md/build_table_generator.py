"""Logic for selecting the member table generator."""

import importlib
import inspect
import logging

from phpdocs_md.column_table_generator import ColumnTableGenerator
from phpdocs_md.errors import InvalidTableGeneratorError
from phpdocs_md.markdown_table_generator import MarkdownTableGenerator
from phpdocs_md.table_generator import TableGenerator

logger = logging.getLogger(__name__)

TABLE_GENERATORS: dict[str, type[TableGenerator]] = {
    "default": MarkdownTableGenerator,
    "columns": ColumnTableGenerator,
}


def build_table_generator(slug: str | None = "default") -> TableGenerator:
    """Instantiate a generator from a known slug or a ``module:ClassName`` path.

    Raises InvalidTableGeneratorError when an imported class cannot be loaded
    or does not subclass TableGenerator. Unknown slugs fall back to the default.
    """
    slug = (slug or "default").strip()
    if ":" not in slug:
        cls = TABLE_GENERATORS.get(slug)
        if cls is None:
            logger.warning("Unknown table generator %r, using the default", slug)
            cls = TABLE_GENERATORS["default"]
        return cls()

    module_name, _, class_name = slug.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Cannot import table generator module {module_name!r}: {e}"
        raise InvalidTableGeneratorError(msg) from e

    cls = getattr(module, class_name, None)
    if not inspect.isclass(cls) or not issubclass(cls, TableGenerator):
        msg = (
            f"The table generator {slug!r} should be a subclass of "
            f"{TableGenerator.__module__}.{TableGenerator.__name__}."
        )
        raise InvalidTableGeneratorError(msg)
    if inspect.isabstract(cls):
        msg = f"The table generator {slug!r} does not implement the render contract."
        raise InvalidTableGeneratorError(msg)
    return cls()
